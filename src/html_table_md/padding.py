"""Unicode-aware padding of a single string.

Widths and precision count code points, never encoded bytes, so a cell
holding "é" is one column wide.
"""


def pad(text: str, width: int, fill: str = " ", left_align: bool = False, precision: int | None = None) -> str:
    """Truncate *text* to *precision* code points, then pad it to *width* with *fill*.

    The fill goes after the text when *left_align* is set and before it
    otherwise.  A non-positive *precision* disables truncation and a *width*
    no larger than the text leaves it unpadded.
    """
    if len(fill) != 1:
        raise ValueError(f"Fill must be a single character, got {fill!r}")

    if precision is not None and 0 < precision < len(text):
        text = text[:precision]

    missing = width - len(text)
    if missing <= 0:
        return text
    if left_align:
        return text + fill * missing
    return fill * missing + text
