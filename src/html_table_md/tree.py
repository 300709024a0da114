"""Bottom-up conversion of an in-memory Node tree.

A minimal stand-in for the host HTML-to-Markdown pipeline: every node's
children are converted first, the node's value becomes their concatenated
output, and table tags are handed to the converter.  A table's sections are
joined with line breaks.  Other elements pass their value through unchanged.
"""

import logging

from html_table_md.converter import TableConverter
from html_table_md.patterns import SUPPORTED_TAGS, TABLE_STRUCTURE_TAGS
from html_table_md.schema import Node, ResolvedElement

logger = logging.getLogger(__name__)


def _content_children(node: Node) -> list[Node]:
    """Drop whitespace-only text leaves that sit directly inside table structure."""
    if node.tag_name.lower() not in TABLE_STRUCTURE_TAGS:
        return list(node.children)
    return [child for child in node.children if not (child.is_text and not child.text.strip())]


def _resolve(node: Node, converter: TableConverter) -> ResolvedElement:
    """Convert *node* and return it with its Markdown output as value."""
    if node.is_text:
        return ResolvedElement(tag_name=node.tag_name, value=node.text)

    children = tuple(_resolve(child, converter) for child in _content_children(node))
    # tbody output is trimmed, so table sections need a line break between them
    joiner = "\n" if node.tag_name.lower() == "table" else ""
    resolved = ResolvedElement(
        tag_name=node.tag_name,
        children=children,
        value=joiner.join(child.value for child in children),
    )
    if node.tag_name.lower() not in SUPPORTED_TAGS:
        return resolved
    return resolved.model_copy(update={"value": converter.convert(resolved)})


def convert_tree(root: Node, converter: TableConverter | None = None) -> str:
    """Convert *root* bottom-up and return its Markdown text."""
    converter = converter if converter is not None else TableConverter()
    logger.debug("Converting tree rooted at <%s>", root.tag_name)
    return _resolve(root, converter).value
