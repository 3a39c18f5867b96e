"""
Table entity: a name, a region, and an ordered list of named columns.

The table object only describes *where* the data lives.  Cell values
stay in the worksheet and are read on demand through a sparse grid (see
:mod:`sheet_tables.values`).  The header row is the region's upper row;
data rows span ``upper + 1 .. lower``.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Callable

from .area import Region, as_region, check_region, require_correct
from .errors import MissingHeader, MissingRequiredValue
from .grid import SparseGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableColumn:
    """A table column: 1-based ordinal ``id`` plus display ``name``."""
    id: int
    name: str


@dataclass(frozen=True)
class Table:
    name: str
    area: Region
    columns: tuple = field(default_factory=tuple)

    @property
    def data_row_count(self) -> int:
        """Number of body rows below the header (never negative)."""
        return max(0, self.area.lower - self.area.upper)

    def __str__(self):
        return f"Table({self.name!r}, {self.area}, {len(self.columns)} columns)"


def header_text(value) -> str:
    """Column names are strings; other header cell values are converted."""
    return value if isinstance(value, str) else str(value)


def create_table(name: str, area, columns) -> Table:
    """Create a table from a name, an area and explicit columns.

    The column count is not checked against the area width.
    """
    return Table(name, as_region(area), tuple(columns))


def create_with_headers(grid: SparseGrid, name: str, area) -> Table:
    """Create a table whose column names come from the area's first row.

    Raises :class:`InvalidRegion` for a malformed area and
    :class:`MissingRequiredValue` if a header cell is empty.
    """
    region = require_correct(area)
    r = region.upper
    columns = []
    for i, c in enumerate(range(region.left, region.right + 1)):
        value = grid.read_cell(r, c)
        if value is None:
            raise MissingRequiredValue(r, c, "table header")
        columns.append(TableColumn(i + 1, header_text(value)))
    return Table(name, region, tuple(columns))


def try_create_with_headers(grid: SparseGrid, name: str, area) -> Table | None:
    """Like :func:`create_with_headers`, but returns ``None`` on failure.

    Failures are logged rather than raised.
    """
    result = check_region(area)
    if not result.valid:
        for problem in result.problems:
            logger.warning(problem)
        return None
    try:
        return create_with_headers(grid, name, area)
    except Exception as err:
        logger.warning(f"Could not retrieve table headers: {err}")
        return None


def get_column_headers(table: Table) -> list[str]:
    """Return the column names in ordinal order."""
    return [col.name for col in table.columns]


def try_get_column_by(table: Table,
                      predicate: Callable[[TableColumn], bool]) -> TableColumn | None:
    """Return the first column for which *predicate* is true."""
    for col in table.columns:
        if predicate(col):
            return col
    return None


def try_get_column_by_name(table: Table, name: str) -> TableColumn | None:
    """Return the first column called *name*, if any."""
    return try_get_column_by(table, lambda col: col.name == name)


def get_column_by_name(table: Table, name: str) -> TableColumn:
    col = try_get_column_by_name(table, name)
    if col is None:
        raise MissingHeader(name, table.name)
    return col


def column_offset(table: Table, name: str) -> int | None:
    """0-based position of the first column called *name* within the table."""
    for i, col in enumerate(table.columns):
        if col.name == name:
            return i
    return None


def duplicate_headers(table: Table) -> list[str]:
    """Column names that occur more than once (lookups use the first)."""
    seen = set()
    dupes = []
    for col in table.columns:
        if col.name in seen and col.name not in dupes:
            dupes.append(col.name)
        seen.add(col.name)
    return dupes


def with_name(table: Table, name: str) -> Table:
    return dataclasses.replace(table, name=name)


def with_area(table: Table, area) -> Table:
    return dataclasses.replace(table, area=as_region(area))
