"""Table store: the ordered collection of sampled tables of a session."""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterator, NamedTuple, TextIO

from ..config import (
    DEFAULT_PAD_CHAR,
    DEFAULT_PAD_LENGTH,
    GrapherConfig,
    RenderConfig,
    validate_pad_char,
    validate_pad_length,
)
from ..core.models import Table
from .sampler import sample

logger = logging.getLogger(__name__)


class IndexOutOfRange(IndexError):
    """Raised by positional accessors given an index outside the store."""

    pass


class StoreSnapshot(NamedTuple):
    """Tables and render settings captured together."""

    tables: tuple[Table, ...]
    render: RenderConfig


class TableStore:
    """Ordered tables plus the settings used to render them.

    Indices are contiguous from 0; removing a table shifts later tables down
    by one. Mutations and snapshots are serialized by a lock so readers always
    iterate a consistent view.

    Examples:
        store = TableStore()
        store.add_function(ConstantFunction(value=6.0), 4, 17)
        store.add_function(math.sin, 0.0, 2 * math.pi, math.pi / 16)
        store.print_tables(sys.stdout, "\\n", "Table {n}")
    """

    def __init__(
        self,
        pad_length: int = DEFAULT_PAD_LENGTH,
        pad_char: str = DEFAULT_PAD_CHAR,
        *,
        unpadded_keys: bool = False,
    ):
        self._render = RenderConfig(
            pad_length=pad_length, pad_char=pad_char, unpadded_keys=unpadded_keys
        ).validate()
        self._tables: list[Table] = []
        self._lock = threading.RLock()

    # ── Alternate constructors ──

    @classmethod
    def with_pad_length(cls, pad_length: int) -> TableStore:
        """Store with the given pad length, padding with spaces."""
        return cls(pad_length=pad_length, pad_char=" ")

    @classmethod
    def with_pad_char(cls, pad_char: str) -> TableStore:
        """Store with the default pad length and the given pad character."""
        return cls(pad_length=DEFAULT_PAD_LENGTH, pad_char=pad_char)

    @classmethod
    def from_config(cls, config: GrapherConfig | RenderConfig) -> TableStore:
        render = config.render if isinstance(config, GrapherConfig) else config
        return cls(
            pad_length=render.pad_length,
            pad_char=render.pad_char,
            unpadded_keys=render.unpadded_keys,
        )

    # ── Render settings ──

    @property
    def pad_length(self) -> int:
        return self._render.pad_length

    @pad_length.setter
    def pad_length(self, value: int) -> None:
        with self._lock:
            self._render.pad_length = validate_pad_length(value)

    @property
    def pad_char(self) -> str:
        return self._render.pad_char

    @pad_char.setter
    def pad_char(self, value: str) -> None:
        with self._lock:
            self._render.pad_char = validate_pad_char(value)

    @property
    def unpadded_keys(self) -> bool:
        return self._render.unpadded_keys

    @unpadded_keys.setter
    def unpadded_keys(self, value: bool) -> None:
        with self._lock:
            self._render.unpadded_keys = bool(value)

    # ── Tables ──

    def add_function(
        self, function: Any, min: float, max: float, step: float = 1.0
    ) -> int:
        """Sample ``function`` over ``[min, max]`` and append the table.

        Returns:
            Index of the new table

        Raises:
            InvalidRange: If step is not positive (the store is unchanged)
            SamplingError: If the function fails (the store is unchanged)
        """
        table = sample(function, min, max, step)
        with self._lock:
            self._tables.append(table)
            index = len(self._tables) - 1
        logger.info("Added table %d (%s, %d rows)", index, table.label, len(table))
        return index

    def add_table(self, table: Table) -> int:
        """Append an already sampled table and return its index."""
        with self._lock:
            self._tables.append(table)
            return len(self._tables) - 1

    def remove_table(self, index: int) -> None:
        """Remove the table at ``index``. Out-of-range indices are ignored."""
        with self._lock:
            if 0 <= index < len(self._tables):
                removed = self._tables.pop(index)
                logger.info("Removed table %d (%s)", index, removed.label)
            else:
                logger.debug(
                    "remove_table(%d) ignored: store has %d tables",
                    index,
                    len(self._tables),
                )

    def get_table(self, index: int) -> Table:
        """Return the table at ``index``.

        Raises:
            IndexOutOfRange: If index is outside ``[0, len)``; negative
                indices are not wrapped.
        """
        with self._lock:
            if not 0 <= index < len(self._tables):
                raise IndexOutOfRange(
                    f"Table index {index} out of range (store has {len(self._tables)})"
                )
            return self._tables[index]

    def tables(self) -> tuple[Table, ...]:
        """Immutable snapshot of the tables in store order."""
        with self._lock:
            return tuple(self._tables)

    def snapshot(self) -> StoreSnapshot:
        """Tables and a copy of the render settings, taken atomically."""
        with self._lock:
            return StoreSnapshot(tuple(self._tables), self._render.copy())

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(self.tables())

    # ── Rendering ──

    def print_tables(
        self,
        sink: TextIO | None = None,
        delimiter: str = "",
        header: str | None = None,
    ) -> None:
        """Print all tables; see ``grapher.rendering.renderer.print_tables``."""
        from ..rendering.renderer import print_tables

        print_tables(self, sink, delimiter=delimiter, header=header)

    def render(self, delimiter: str = "", header: str | None = None) -> str:
        """Rendered text of all tables."""
        from ..rendering.renderer import render_tables

        return render_tables(self, delimiter=delimiter, header=header)
