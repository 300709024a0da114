"""Data model for table conversion.

Element is the node contract the host pipeline satisfies.  Node and
ResolvedElement are the in-memory tree used by convert_tree(), and TableGrid
is the rectangular cell grid the alignment pass re-parses a table into.
"""

from typing import Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, model_validator

from html_table_md.patterns import TEXT_NODE_TAG


@runtime_checkable
class Element(Protocol):
    """A parsed document node whose children are already converted."""

    @property
    def tag_name(self) -> str: ...

    @property
    def children(self) -> Sequence["Element"]: ...

    @property
    def value(self) -> str: ...


# ─── In-Memory Tree ──────────────────────────────────────────────────────────


class Node(BaseModel):
    """Unconverted document node: an element with children, or a text leaf."""

    tag_name: str
    children: list["Node"] = []
    text: str = ""

    @classmethod
    def text_node(cls, text: str) -> "Node":
        return cls(tag_name=TEXT_NODE_TAG, text=text)

    @classmethod
    def element(cls, tag_name: str, *children: "Node | str") -> "Node":
        """Build an element; plain strings become text leaves."""
        return cls(
            tag_name=tag_name,
            children=[cls.text_node(child) if isinstance(child, str) else child for child in children],
        )

    @property
    def is_text(self) -> bool:
        return self.tag_name == TEXT_NODE_TAG


class ResolvedElement(BaseModel):
    """A node whose children are converted and whose value is their joined text."""

    model_config = ConfigDict(frozen=True)

    tag_name: str
    children: tuple["ResolvedElement", ...] = ()
    value: str = ""


# ─── Cell Grid ───────────────────────────────────────────────────────────────


class TableGrid(BaseModel):
    """Rectangular grid of cell strings; row 0 fixes the column count.

    Rows shorter than the first row are filled with empty cells and rows
    longer than it are cut back, so every row has exactly column_count cells.
    """

    rows: list[list[str]]

    @model_validator(mode="after")
    def fill_ragged_rows(self) -> "TableGrid":
        """Normalise every row to the first row's width."""
        if not self.rows:
            raise ValueError("A table grid needs at least one row")
        n_cols = len(self.rows[0])
        self.rows = [(row + [""] * (n_cols - len(row)))[:n_cols] for row in self.rows]
        return self

    @property
    def column_count(self) -> int:
        return len(self.rows[0])

    def column(self, index: int) -> list[str]:
        """Return every row's cell at *index*."""
        return [row[index] for row in self.rows]
