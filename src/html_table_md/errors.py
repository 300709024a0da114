"""Typed failures raised while converting table nodes."""


class TableConversionError(ValueError):
    """Base class for every failure raised by the table converter."""


class MalformedHeaderError(TableConversionError):
    """Raised when a thead has no rows or its first row has no header segments."""


class EmptyTableError(TableConversionError):
    """Raised when a table's inner text contains no rows."""
