"""Fixed-width cell and header formatting."""

from ..utils.numbers import canonical_text

HEADER_TOKEN = "{n}"


class FormatError(ValueError):
    """Raised when a value cannot be fitted into the requested cell."""

    pass


def format_cell(
    value: float,
    length: int,
    align_left: bool,
    pad_char: str,
    *,
    unpadded_keys: bool = False,
) -> str:
    """Fit ``value`` into a cell of ``length`` characters.

    The canonical text of the value is cut to at most ``length - 1``
    characters, so every cell keeps at least one pad character. Left-aligned
    cells (inputs) are padded on the right, right-aligned cells (outputs) on
    the left.

    Args:
        value: Number to render
        length: Cell width, at least 1
        align_left: Pad on the right if True, on the left if False
        pad_char: Single filler character
        unpadded_keys: Emit left-aligned cells without their padding, as the
            legacy renderer did

    Raises:
        FormatError: If length is below 1 or pad_char is not one character
    """
    if length < 1:
        raise FormatError(f"Cell length must be at least 1, got {length}")
    if len(pad_char) != 1:
        raise FormatError(f"Pad character must be a single character: {pad_char!r}")

    text = canonical_text(value)[: length - 1]
    padding = pad_char * (length - len(text))

    if align_left:
        return text if unpadded_keys else text + padding
    return padding + text


def format_header(template: str, table_number: int) -> str:
    """Replace every ``{n}`` in ``template`` with ``table_number``."""
    if HEADER_TOKEN not in template:
        return template
    return template.replace(HEADER_TOKEN, str(table_number))


def horizontal_rule(length: int) -> str:
    """Rule spanning two cells and their separator."""
    return "-" * ((length * 2) + 1)
