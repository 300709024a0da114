"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from html_table_md.schema import Node

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


def _make_table(header: list[str] | None, rows: list[list[str]]) -> Node:
    """Build a <table> Node tree with an optional <thead> and a <tbody>."""
    children: list[Node] = []
    if header is not None:
        header_row = Node.element("tr", *(Node.element("th", label) for label in header))
        children.append(Node.element("thead", header_row))
    body_rows = [Node.element("tr", *(Node.element("td", cell) for cell in row)) for row in rows]
    children.append(Node.element("tbody", *body_rows))
    return Node.element("table", *children)


@pytest.fixture
def make_table():
    """Factory fixture: make_table(header, rows) -> table Node."""
    return _make_table
