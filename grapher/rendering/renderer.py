"""Text rendering of a table store.

Output layout, for pad length L and pad character c:

    <header line>                      only when a header template is given
    <input cell>|<output cell>         one per sample
    -------------------------          2L + 1 dashes after every sample
    <delimiter>                        between tables, written verbatim
"""

from __future__ import annotations

import io
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .formatter import format_cell, format_header, horizontal_rule

if TYPE_CHECKING:
    from ..tables.store import TableStore

logger = logging.getLogger(__name__)

CELL_SEPARATOR = "|"


def print_tables(
    store: TableStore,
    sink: TextIO | None = None,
    delimiter: str = "",
    header: str | None = None,
) -> None:
    """Write every table of ``store`` to ``sink`` (standard output by default).

    The store is snapshotted once, so tables added or removed while printing
    do not affect the output.

    Raises:
        FormatError: If the store's pad settings cannot produce a cell
    """
    out = sink if sink is not None else sys.stdout
    tables, settings = store.snapshot()
    length = settings.pad_length
    pad_char = settings.pad_char
    unpadded_keys = settings.unpadded_keys
    rule = horizontal_rule(length)

    for i, table in enumerate(tables):
        if header is not None:
            out.write(format_header(header, i + 1) + "\n")

        for x, y in table.rows:
            key_cell = format_cell(
                x, length, True, pad_char, unpadded_keys=unpadded_keys
            )
            value_cell = format_cell(y, length, False, pad_char)
            out.write(key_cell + CELL_SEPARATOR + value_cell + "\n")
            out.write(rule + "\n")

        # No delimiter after the last table
        if i + 1 != len(tables):
            out.write(delimiter)

    logger.debug("Rendered %d table(s) with pad length %d", len(tables), length)


def render_tables(
    store: TableStore,
    delimiter: str = "",
    header: str | None = None,
) -> str:
    """Same as print_tables, returning the text instead of writing it."""
    buffer = io.StringIO()
    print_tables(store, buffer, delimiter=delimiter, header=header)
    return buffer.getvalue()
