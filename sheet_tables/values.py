"""
Value extraction from tables.

Every function takes a sparse grid (anything with
``read_cell(row, column)``) and a :class:`~sheet_tables.table.Table`, and
reads the grid cells under the table's region.  Rows are always consulted
in increasing order, top to bottom.

Row offsets in the results are 0-based and count from the first data row
(the row directly below the header).
"""

import logging
from typing import Any

from .errors import DuplicateHeader, MissingHeader, MissingRequiredValue
from .grid import SparseGrid
from .table import Table, column_offset, header_text

logger = logging.getLogger(__name__)


def _data_rows(table: Table) -> range:
    """1-based grid rows holding data, i.e. ``upper + 1 .. lower``."""
    area = table.area
    return range(area.upper + 1, area.upper + 1 + table.data_row_count)


def try_get_column_values_by_header(grid: SparseGrid, header: str,
                                    table: Table) -> list[Any] | None:
    """Return the values of the column called *header*, top to bottom.

    Empty cells are skipped, so the result may be shorter than the number
    of data rows; use :func:`try_get_indexed_column_values_by_header` to
    keep row positions.  Returns ``None`` if the table has no such column.
    """
    i = column_offset(table, header)
    if i is None:
        return None
    c = table.area.left + i
    values = []
    for r in _data_rows(table):
        v = grid.read_cell(r, c)
        if v is not None:
            values.append(v)
    return values


def get_column_values_by_header(grid: SparseGrid, header: str,
                                table: Table) -> list[Any]:
    values = try_get_column_values_by_header(grid, header, table)
    if values is None:
        raise MissingHeader(header, table.name)
    return values


def try_get_indexed_column_values_by_header(
        grid: SparseGrid, header: str,
        table: Table) -> list[tuple[int, Any]] | None:
    """Return ``(row_offset, value)`` pairs for the non-empty cells of the
    column called *header*, or ``None`` if there is no such column."""
    i = column_offset(table, header)
    if i is None:
        return None
    c = table.area.left + i
    indexed = []
    for offset, r in enumerate(_data_rows(table)):
        v = grid.read_cell(r, c)
        if v is not None:
            indexed.append((offset, v))
    return indexed


def try_get_key_values_by_headers(grid: SparseGrid, key_header: str,
                                  value_header: str, default_value,
                                  table: Table) -> list[tuple[Any, Any]] | None:
    """Pair the key column with the value column, one entry per data row.

    Empty value cells are replaced by *default_value*.  Empty key cells
    raise :class:`MissingRequiredValue`.  Returns ``None`` if either
    header is missing from the table.
    """
    ki = column_offset(table, key_header)
    vi = column_offset(table, value_header)
    if ki is None or vi is None:
        return None
    left = table.area.left
    ck, cv = left + ki, left + vi
    pairs = []
    for r in _data_rows(table):
        k = grid.read_cell(r, ck)
        if k is None:
            raise MissingRequiredValue(r, ck, f"key for column {key_header!r}")
        v = grid.read_cell(r, cv)
        pairs.append((k, default_value if v is None else v))
    return pairs


def to_sparse_matrix(grid: SparseGrid, table: Table) -> dict[tuple[str, int], Any]:
    """Read a complete table into ``{(header, row_offset): value}``.

    Headers are read from the grid's header row; an empty header cell
    raises :class:`MissingRequiredValue` and a repeated header raises
    :class:`DuplicateHeader`.  Empty body cells produce no entry.
    """
    area = table.area
    headers = {}
    for c in range(area.left, area.right + 1):
        h = grid.read_cell(area.upper, c)
        if h is None:
            raise MissingRequiredValue(area.upper, c, "table header")
        header = header_text(h)
        if header in headers.values():
            raise DuplicateHeader(header, table.name)
        headers[c] = header

    rows = _data_rows(table)
    matrix: dict[tuple[str, int], Any] = {}
    for c, header in headers.items():
        for offset, r in enumerate(rows):
            v = grid.read_cell(r, c)
            if v is not None:
                matrix[(header, offset)] = v
    logger.debug(f"Read {len(matrix)} cells from table '{table.name}'")
    return matrix
