"""Compiled regex patterns and constant tuples for table conversion.

Used by formatting.py to assemble cell/row text and to re-split the
pipe-delimited table text during the alignment pass.
"""

import re

# ─── Tag Sets ─────────────────────────────────────────────────────────────────

# Tags the host pipeline must route to the table converter
SUPPORTED_TAGS = ("table", "thead", "tbody", "tfoot", "tr", "td", "th")

# Tags whose whitespace-only text children carry no content
TABLE_STRUCTURE_TAGS = ("table", "thead", "tbody", "tfoot", "tr")

# Tag name used for text leaves in the in-memory tree
TEXT_NODE_TAG = "#text"


# ─── Cell Patterns ────────────────────────────────────────────────────────────

# One or more newline characters inside a cell
NEWLINE_RUN_RE = re.compile(r"\n+")

# Literal replacement for a newline run: backslash + "n", not a real newline
ESCAPED_NEWLINE = "\\n"

# A pipe that is not already escaped with a backslash
UNESCAPED_PIPE_RE = re.compile(r"(?<!\\)\|")

# A whole cell made of dashes only (header separator), matched before trimming
DASH_RUN_RE = re.compile(r"^-+$")


# ─── Row Layout Constants ────────────────────────────────────────────────────

# Whitespace removed when trimming cells and blocks; NBSP and other Unicode spaces are content
TRIM_CHARS = " \t\n\r\0\x0b"

# Joiner between cells in a rendered row
CELL_JOINER = " | "

# Placeholder for a separator cell during width computation and padding
SEPARATOR_MARKER = "-"
