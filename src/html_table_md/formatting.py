"""Markdown text assembly for table nodes and the table-wide alignment pass.

Cells, rows and header blocks are assembled as plain pipe-delimited text.
Once the whole table is available, align_table() re-parses that text into a
TableGrid, drops columns that carry no content and pads every remaining
column to its widest cell.
"""

import logging

from html_table_md.config import DEFAULT_MIN_COLUMN_WIDTH, DEFAULT_MIN_SEPARATOR_DASHES, DEFAULT_SEPARATOR_PADDING
from html_table_md.errors import EmptyTableError, MalformedHeaderError
from html_table_md.padding import pad
from html_table_md.patterns import (
    CELL_JOINER,
    DASH_RUN_RE,
    ESCAPED_NEWLINE,
    NEWLINE_RUN_RE,
    SEPARATOR_MARKER,
    TRIM_CHARS,
    UNESCAPED_PIPE_RE,
)
from html_table_md.schema import TableGrid

logger = logging.getLogger(__name__)


# ─── Per-Node Assembly ───────────────────────────────────────────────────────


def format_cell(value: str, escape_pipes: bool = True) -> str:
    """Flatten a td/th value onto one line.

    Newline runs become the two characters backslash + n, and bare pipes are
    escaped so they survive the alignment re-split.
    """
    text = NEWLINE_RUN_RE.sub(lambda _: ESCAPED_NEWLINE, value.strip(TRIM_CHARS))
    if escape_pipes:
        text = UNESCAPED_PIPE_RE.sub(lambda _: "\\|", text)
    return text


def format_row(cell_values: list[str]) -> str:
    """Join trimmed cell values into a '| a | b |' line ending in a newline."""
    return "| " + CELL_JOINER.join(value.strip(TRIM_CHARS) for value in cell_values) + " |\n"


def format_body(value: str) -> str:
    return value.strip(TRIM_CHARS)


def header_labels(header_line: str) -> list[str]:
    """Recover the header labels from a rendered header row."""
    inner = header_line.strip("\n").strip("|")
    if not inner:
        raise MalformedHeaderError(f"Header row has no cells: {header_line!r}")
    return inner.split(CELL_JOINER)


def separator_line(
    labels: list[str],
    min_dashes: int = DEFAULT_MIN_SEPARATOR_DASHES,
    padding: int = DEFAULT_SEPARATOR_PADDING,
) -> str:
    """Build the '|----|---|' line that follows a header row."""
    segments = ["-" * max(len(label.strip(TRIM_CHARS)) + padding, min_dashes) for label in labels]
    return "|" + "|".join(segments) + "|"


def format_header(
    row_values: list[str],
    min_dashes: int = DEFAULT_MIN_SEPARATOR_DASHES,
    padding: int = DEFAULT_SEPARATOR_PADDING,
) -> str:
    """Return the thead's first row followed by its separator line.

    Only the first row is used; *row_values* holds the converted rows in
    document order.
    """
    if not row_values:
        raise MalformedHeaderError("Table header has no rows")
    header_line = row_values[0]
    labels = header_labels(header_line)
    return header_line + separator_line(labels, min_dashes, padding) + "\n"


# ─── Table-Wide Alignment ────────────────────────────────────────────────────


def _split_cells(line: str) -> list[str]:
    """Split one row on unescaped pipes, dropping the outer empty entries."""
    cells = UNESCAPED_PIPE_RE.split(line)[1:-1]
    # Dash runs are checked before trimming so a padded "| --- |" data cell stays literal
    return [SEPARATOR_MARKER if DASH_RUN_RE.match(cell) else cell.strip(TRIM_CHARS) for cell in cells]


def parse_grid(inner: str) -> TableGrid:
    """Re-parse a table's pipe-delimited text into a rectangular grid."""
    rows = [_split_cells(line) for line in inner.split("\n") if line.strip(TRIM_CHARS)]
    if not rows:
        raise EmptyTableError("Table has no rows")
    return TableGrid(rows=rows)


def align_table(inner: str, min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH) -> str:
    """Render a table's inner text as a column-aligned Markdown table block.

    Columns whose widest cell is shorter than *min_column_width* code points
    are dropped from every row.  Every other cell is left-justified to its
    column width; separator markers are filled with dashes instead of spaces.
    The block ends with a blank line.
    """
    grid = parse_grid(inner)

    widths = [max(len(cell) for cell in grid.column(i)) for i in range(grid.column_count)]
    survivors = [i for i, width in enumerate(widths) if width >= min_column_width]
    if len(survivors) < len(widths):
        logger.debug(
            "Dropping %d of %d columns narrower than %d",
            len(widths) - len(survivors),
            len(widths),
            min_column_width,
        )

    lines: list[str] = []
    for row in grid.rows:
        cells = [
            pad(row[i], widths[i], fill="-" if row[i] == SEPARATOR_MARKER else " ", left_align=True)
            for i in survivors
        ]
        lines.append("| " + CELL_JOINER.join(cells) + " |")

    logger.debug("Aligned table: %d rows x %d columns", len(lines), len(survivors))
    return "\n".join(lines).strip(TRIM_CHARS) + "\n\n"
