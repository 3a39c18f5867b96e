"""
Worksheet-level table directory backed by openpyxl.

openpyxl keeps table definitions per worksheet (``ws.tables``); this
module converts them to and from :class:`~sheet_tables.table.Table`.
"""

import logging
from typing import Callable

from openpyxl import load_workbook
from openpyxl.worksheet.filters import AutoFilter
from openpyxl.worksheet.table import (
    Table as XlTable,
    TableColumn as XlTableColumn,
    TableStyleInfo,
)

from .area import as_region, require_correct
from .grid import WorksheetGrid
from .table import Table, TableColumn, create_table, header_text

logger = logging.getLogger(__name__)


def open_workbook(path: str, data_only: bool = True):
    """Open a workbook.  ``data_only=True`` reads cached formula results."""
    logger.info(f"Opening workbook: {path}")
    return load_workbook(path, data_only=data_only)


def _header_columns(ws, ref) -> list[TableColumn]:
    """Columns named after the header row of *ref*.

    Tables added in this session have no ``tableColumns`` until openpyxl
    saves them; empty header cells are named ``ColumnN``.
    """
    region = as_region(ref)
    row = next(ws.iter_rows(min_row=region.upper, max_row=region.upper,
                            min_col=region.left, max_col=region.right,
                            values_only=True))
    return [TableColumn(i, f"Column{i}" if v is None else header_text(v))
            for i, v in enumerate(row, start=1)]


def _from_openpyxl(xl_table, ws) -> Table:
    if xl_table.tableColumns:
        columns = [TableColumn(int(col.id), col.name)
                   for col in xl_table.tableColumns]
    else:
        columns = _header_columns(ws, xl_table.ref)
    return create_table(xl_table.name or xl_table.displayName,
                        xl_table.ref, columns)


def list_tables(ws) -> list[Table]:
    """List all tables defined on the worksheet."""
    return [_from_openpyxl(t, ws) for t in ws.tables.values()]


def try_get_by_name_by(predicate: Callable[[str], bool], ws) -> Table | None:
    """Return the first table whose name satisfies *predicate*."""
    for xl_table in ws.tables.values():
        if predicate(xl_table.name):
            return _from_openpyxl(xl_table, ws)
    return None


def try_get_by_name(name: str, ws) -> Table | None:
    return try_get_by_name_by(lambda n: n == name, ws)


def add_table(ws, table: Table, style_name: str | None = None,
              write_headers: bool = True):
    """Register *table* on the worksheet.

    The header row is filled from the column names (openpyxl requires
    header cells to match the column definitions on save).  Raises
    :class:`~sheet_tables.errors.InvalidRegion` for a malformed area and
    ``ValueError`` if a table of that name already exists.
    """
    region = require_correct(table.area)
    ref = str(region)

    if write_headers:
        for i, col in enumerate(table.columns):
            ws.cell(row=region.upper, column=region.left + i, value=col.name)

    xl_table = XlTable(
        displayName=table.name,
        ref=ref,
        autoFilter=AutoFilter(ref=ref),
        tableColumns=[XlTableColumn(id=col.id, name=col.name)
                      for col in table.columns],
    )
    if style_name:
        xl_table.tableStyleInfo = TableStyleInfo(
            name=style_name, showFirstColumn=False, showLastColumn=False,
            showRowStripes=True, showColumnStripes=False)
    ws.add_table(xl_table)
    logger.info(f"Added table '{table.name}' at {ref} on sheet '{ws.title}'")
    return xl_table


def find_table(path: str, table_name: str, sheet_name: str | None = None,
               data_only: bool = True) -> tuple[Table, WorksheetGrid]:
    """Locate *table_name* in a workbook and snapshot its worksheet.

    Searches every sheet unless *sheet_name* is given.  Raises
    ``LookupError`` if the table (or sheet) does not exist.
    """
    wb = open_workbook(path, data_only=data_only)
    try:
        if sheet_name is not None:
            if sheet_name not in wb.sheetnames:
                raise LookupError(f"Sheet '{sheet_name}' not found in {path}")
            candidates = [wb[sheet_name]]
        else:
            candidates = wb.worksheets
        for ws in candidates:
            table = try_get_by_name(table_name, ws)
            if table is not None:
                return table, WorksheetGrid(ws)
    finally:
        wb.close()
    raise LookupError(f"Table '{table_name}' not found in {path}")
