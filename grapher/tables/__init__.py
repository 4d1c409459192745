"""Sampling and storage of function tables."""

from .sampler import sample, validate_range, InvalidRange, SamplingError
from .store import TableStore, StoreSnapshot, IndexOutOfRange

__all__ = [
    "sample",
    "validate_range",
    "InvalidRange",
    "SamplingError",
    "TableStore",
    "StoreSnapshot",
    "IndexOutOfRange",
]
