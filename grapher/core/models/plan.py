"""Render plan models and YAML loading.

A render plan lists the functions to sample, each with its own range, plus
optional presentation settings for the launcher:

    header: "Table {n}"
    delimiter: "\\n"
    tables:
      - function: "linear:3,4"
        min: 0
        max: 5
        step: 0.5
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .functions import SerializableFunction, parse_function


class PlanEntry(BaseModel):
    """One function to sample over ``[min, max]``."""

    model_config = ConfigDict(extra="forbid")

    function: str = Field(description="Function text, e.g. 'const:6' or 'sin(x)'")
    min: float
    max: float
    step: float = Field(default=1.0, description="Input increment, must be positive")

    def to_function(self) -> SerializableFunction:
        return parse_function(self.function)


class RenderPlan(BaseModel):
    """Functions to tabulate and how to print them."""

    model_config = ConfigDict(extra="forbid")

    header: str | None = None
    delimiter: str | None = None
    tables: list[PlanEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _reject_empty_document(cls, data):
        if data is None:
            raise ValueError("Render plan is empty")
        return data

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RenderPlan":
        """Load a plan from a YAML file."""
        path = Path(path)

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.model_validate(data)
