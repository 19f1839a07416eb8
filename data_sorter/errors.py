# ==============================================
# Error Taxonomy
# ==============================================
#
# PURPOSE:
#   Every failure the core can report, as one exception hierarchy.
#   The core raises; the presentation boundary (app_state handlers,
#   cli) catches DataSorterError and turns it into a user message.
#
# CLASSES:
# --------
# - DataSorterError          base class
# - ParseError               malformed JSON / wrong top-level shape
# - InvalidKey               sort key outside SortKey
# - NonNumericField          value cannot be coerced to a number
# - EmptyInput               statistic requested over zero records
# - FetchError               data source request failed
#
# The value errors also subclass ValueError so callers that only
# know about builtin exceptions still catch them.
#
# ==============================================

from typing import Any, Iterable, Optional


class DataSorterError(Exception):
    """Base class for all data sorter errors."""


class ParseError(DataSorterError, ValueError):
    """Raised when raw text is not a JSON array of record objects."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class InvalidKey(DataSorterError, ValueError):
    """Raised when a sort key is not one of the supported fields."""

    def __init__(self, key: Any, allowed: Iterable[str]):
        self.key = key
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid sort key {key!r}; expected one of: {', '.join(self.allowed)}"
        )


class NonNumericField(DataSorterError, ValueError):
    """Raised when a record field cannot be coerced to a number."""

    def __init__(self, field: str, value: Any, index: Optional[int] = None):
        self.field = field
        self.value = value
        self.index = index
        where = f" in record {index}" if index is not None else ""
        super().__init__(f"Field '{field}'{where} is not numeric: {value!r}")

    def at(self, index: int) -> "NonNumericField":
        """Return a copy of this error pinned to a record position."""
        return NonNumericField(self.field, self.value, index)


class EmptyInput(DataSorterError, ValueError):
    """Raised when a statistic is requested over an empty RecordSet."""

    def __init__(self, message: str = "No data: cannot compute a percentage over zero records"):
        super().__init__(message)


class FetchError(DataSorterError):
    """Raised when the users dataset cannot be retrieved."""

    def __init__(self, url: str, message: str = "Failed to fetch user data. Please try again later."):
        self.url = url
        super().__init__(message)
