"""Table converter callback for an HTML-to-Markdown pipeline.

The host pipeline converts nodes bottom-up and routes every tag listed by
supported_tags() to TableConverter.convert().  Each call is a pure function
of the node it receives.
"""

import logging

from html_table_md.config import ConverterOptions
from html_table_md.formatting import align_table, format_body, format_cell, format_header, format_row
from html_table_md.patterns import SUPPORTED_TAGS
from html_table_md.schema import Element

logger = logging.getLogger(__name__)


def supported_tags() -> tuple[str, ...]:
    """Return the tags the host must route to TableConverter."""
    return SUPPORTED_TAGS


class TableConverter:
    """Converts table, thead, tbody, tfoot, tr, td and th nodes to Markdown text."""

    supported_tags = SUPPORTED_TAGS

    def __init__(self, options: ConverterOptions | None = None):
        self.options = options if options is not None else ConverterOptions()

    def convert(self, element: Element) -> str:
        """Return the Markdown fragment for *element*.

        Unrecognised tags (tfoot included) pass their resolved value through
        unchanged.
        """
        tag = element.tag_name.lower()

        if tag == "tr":
            return format_row([child.value for child in element.children])

        if tag in ("td", "th"):
            return format_cell(element.value, escape_pipes=self.options.escape_pipes)

        if tag == "tbody":
            return format_body(element.value)

        if tag == "thead":
            return format_header(
                [child.value for child in element.children],
                min_dashes=self.options.min_separator_dashes,
                padding=self.options.separator_padding,
            )

        if tag == "table":
            return align_table(element.value, min_column_width=self.options.min_column_width)

        logger.debug("Passing <%s> through unchanged", tag)
        return element.value

    def __call__(self, element: Element) -> str:
        return self.convert(element)
