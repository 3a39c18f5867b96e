"""
Sparse grid accessors.

The table algorithms never touch a workbook directly.  They read cells
through an object with a ``read_cell(row, column)`` method that returns
the resolved cell value, or ``None`` when the cell is empty.  An empty
cell is a normal outcome; only a malformed request (row or column below
1) raises.

Three accessors are provided:

* :class:`MappingGrid`   - an in-memory ``{(row, column): value}`` dict.
* :class:`WorksheetGrid` - a snapshot of an openpyxl worksheet.
* :class:`FrameGrid`     - a pandas DataFrame with 1-based labels, as
  produced by :func:`load_sheet_frame`.
"""

import logging
from typing import Any, Protocol

import numpy as np
import pandas as pd
from openpyxl import load_workbook

logger = logging.getLogger(__name__)


class SparseGrid(Protocol):
    def read_cell(self, row: int, column: int) -> Any | None:
        ...


def _check_position(row: int, column: int):
    if row < 1 or column < 1:
        raise ValueError(
            f"Grid positions are 1-based, got row={row}, column={column}")


class MappingGrid:
    """Grid backed by a plain dict keyed by ``(row, column)``."""

    def __init__(self, cells: dict[tuple[int, int], Any] | None = None):
        self._cells = {k: v for k, v in (cells or {}).items() if v is not None}

    @classmethod
    def from_rows(cls, rows, first_row: int = 1, first_column: int = 1):
        """Build a grid from a list of row lists; ``None`` marks an empty cell."""
        cells = {}
        for r, values in enumerate(rows, start=first_row):
            for c, value in enumerate(values, start=first_column):
                if value is not None:
                    cells[(r, c)] = value
        return cls(cells)

    def read_cell(self, row: int, column: int) -> Any | None:
        _check_position(row, column)
        return self._cells.get((row, column))

    def __len__(self):
        return len(self._cells)

    def __repr__(self):
        return f"MappingGrid({len(self._cells)} cells)"


class WorksheetGrid(MappingGrid):
    """Read-only snapshot of an openpyxl worksheet.

    The worksheet is scanned once; later lookups never call ``ws.cell``,
    which would create empty cells as a side effect.  openpyxl resolves
    shared strings while loading, so values are plain scalars.
    """

    def __init__(self, ws):
        cells = {}
        if ws.max_row and ws.max_column:
            rows = ws.iter_rows(min_row=1, min_col=1, values_only=True)
            for r, values in enumerate(rows, start=1):
                for c, value in enumerate(values, start=1):
                    if value is not None:
                        cells[(r, c)] = value
        super().__init__(cells)
        self.title = ws.title
        logger.debug(f"Snapshot of sheet '{ws.title}': {len(cells)} cells")

    def __repr__(self):
        return f"WorksheetGrid({self.title!r}, {len(self)} cells)"


def _to_python(value):
    if isinstance(value, np.generic):
        return value.item()
    return value


class FrameGrid:
    """Grid backed by a DataFrame whose index and columns are 1-based
    row and column numbers."""

    def __init__(self, df: pd.DataFrame):
        self.df = df

    def read_cell(self, row: int, column: int) -> Any | None:
        _check_position(row, column)
        if row not in self.df.index or column not in self.df.columns:
            return None
        value = self.df.at[row, column]
        if not isinstance(value, str) and pd.isna(value):
            return None
        return _to_python(value)

    def __repr__(self):
        return f"FrameGrid(shape={self.df.shape})"


def load_sheet_frame(path: str, sheet_name: str,
                     data_only: bool = True) -> pd.DataFrame:
    """Load a worksheet into a DataFrame preserving cell positions.

    Row / column labels are 1-based to match openpyxl conventions.
    """
    wb = load_workbook(path, data_only=data_only)
    ws = wb[sheet_name]
    max_row = ws.max_row or 0
    max_col = ws.max_column or 0

    if max_row == 0 or max_col == 0:
        wb.close()
        return pd.DataFrame()

    data = [list(values) for values in
            ws.iter_rows(min_row=1, max_row=max_row, min_col=1,
                         max_col=max_col, values_only=True)]
    wb.close()

    cols = list(range(1, max_col + 1))
    idx = list(range(1, max_row + 1))
    return pd.DataFrame(data, index=idx, columns=cols)
