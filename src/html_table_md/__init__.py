"""HTML table to GitHub-flavored Markdown conversion.

Submodules:
  patterns    -- compiled regex patterns and constant tuples
  errors      -- typed conversion failures
  config      -- ConverterOptions model and .env loading
  schema      -- Element protocol, Node tree and TableGrid Pydantic models
  padding     -- Unicode code-point aware padding
  formatting  -- per-tag text assembly and the table-wide alignment pass
  converter   -- TableConverter callback for the host pipeline
  tree        -- bottom-up convert_tree driver
"""

from html_table_md.config import ConverterOptions
from html_table_md.converter import TableConverter, supported_tags
from html_table_md.errors import EmptyTableError, MalformedHeaderError, TableConversionError
from html_table_md.padding import pad
from html_table_md.schema import Element, Node
from html_table_md.tree import convert_tree

__all__ = [
    "ConverterOptions",
    "Element",
    "EmptyTableError",
    "MalformedHeaderError",
    "Node",
    "TableConversionError",
    "TableConverter",
    "convert_tree",
    "pad",
    "supported_tags",
]
