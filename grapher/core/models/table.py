"""Sampled table model."""

from pydantic import BaseModel, ConfigDict, Field


class Table(BaseModel):
    """Ordered (input, output) samples of one function over a range.

    Rows are kept as a sequence of pairs in insertion order; inputs are never
    looked up by value, so no float hashing is involved.
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[float, float], ...] = Field(default_factory=tuple)
    label: str | None = Field(
        default=None, description="Description of the sampled function"
    )

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def inputs(self) -> list[float]:
        return [x for x, _ in self.rows]

    @property
    def outputs(self) -> list[float]:
        return [y for _, y in self.rows]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {"label": self.label, "rows": [[x, y] for x, y in self.rows]}
