"""
Exception types raised by the table-region core.

Lookups with a meaningful "not found" outcome return ``None`` instead of
raising; these exceptions cover malformed input and violated
required-present invariants.
"""


class SheetTablesError(Exception):
    """Base class for all errors raised by :mod:`sheet_tables`."""


class MalformedAddress(SheetTablesError, ValueError):
    """Text does not decode to a valid A1-style cell coordinate."""

    def __init__(self, text, reason: str = ""):
        self.text = text
        message = f"Malformed cell address {text!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidRegion(SheetTablesError, ValueError):
    """A region has inverted boundaries or unparsable corners."""

    def __init__(self, region, problems=()):
        self.region = region
        self.problems = tuple(problems)
        detail = "; ".join(self.problems) or "invalid boundaries"
        super().__init__(f"Invalid region {str(region)!r}: {detail}")


class MissingHeader(SheetTablesError, LookupError):
    """The requested column name does not exist in the table."""

    def __init__(self, header, table_name: str | None = None):
        self.header = header
        self.table_name = table_name
        where = f" in table {table_name!r}" if table_name else ""
        super().__init__(f"No column with header {header!r}{where}")


class MissingRequiredValue(SheetTablesError, LookupError):
    """A cell that must hold a value is empty."""

    def __init__(self, row: int, column: int, what: str = "value"):
        self.row = row
        self.column = column
        self.what = what
        super().__init__(
            f"Required {what} missing at row {row}, column {column}"
        )


class DuplicateHeader(SheetTablesError, ValueError):
    """Two header cells of a table carry the same name."""

    def __init__(self, header, table_name: str | None = None):
        self.header = header
        self.table_name = table_name
        where = f" in table {table_name!r}" if table_name else ""
        super().__init__(f"Duplicate column header {header!r}{where}")
