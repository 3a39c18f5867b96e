"""
Output formatters - render tables and extracted values as JSON, Markdown,
or a pandas DataFrame.
"""

import json
from typing import Any

import pandas as pd

from .table import Table, get_column_headers


# ---------------------------------------------------------------------------
# Table description
# ---------------------------------------------------------------------------

def table_summary(table: Table) -> dict[str, Any]:
    """Plain-dict description of a table (name, area, boundaries, columns)."""
    area = table.area
    return {
        "name": table.name,
        "area": str(area),
        "left": area.left,
        "right": area.right,
        "upper": area.upper,
        "lower": area.lower,
        "data_rows": table.data_row_count,
        "columns": [{"id": c.id, "name": c.name} for c in table.columns],
    }


# ---------------------------------------------------------------------------
# pandas
# ---------------------------------------------------------------------------

def matrix_to_frame(matrix: dict[tuple[str, int], Any], headers: list[str],
                    row_count: int | None = None) -> pd.DataFrame:
    """Expand a sparse ``{(header, offset): value}`` matrix to a DataFrame.

    Rows are 0-based data-row offsets, columns follow *headers*; cells
    missing from the matrix are None.  Cells keep their original types.
    """
    if row_count is None:
        row_count = max((offset for _, offset in matrix), default=-1) + 1
    by_column: dict[str, dict[int, Any]] = {h: {} for h in headers}
    for (header, offset), value in matrix.items():
        by_column.setdefault(header, {})[offset] = value
    # Missing cells stay None; int cells are never upcast to float.
    rows = [[by_column[h].get(i) for h in headers] for i in range(row_count)]
    return pd.DataFrame(rows, index=range(row_count), columns=headers,
                        dtype=object)


def matrix_records(matrix: dict[tuple[str, int], Any]) -> list[dict[str, Any]]:
    """Flatten a sparse matrix into JSON-friendly records."""
    return [{"header": h, "row": offset, "value": v}
            for (h, offset), v in matrix.items()]


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def to_markdown(headers: list[str], rows: list[list[Any]]) -> str:
    """Render a markdown table from headers and row value lists."""
    if not headers:
        return "_empty table_\n"

    lines = ["| " + " | ".join(str(h) for h in headers) + " |"]
    lines.append("| " + " | ".join(["---"] * len(headers)) + " |")
    for row in rows:
        vals = ["" if v is None or (not isinstance(v, str) and pd.isna(v))
                else str(v) for v in row]
        # Pad or trim to match header count
        while len(vals) < len(headers):
            vals.append("")
        vals = vals[: len(headers)]
        lines.append("| " + " | ".join(vals) + " |")
    return "\n".join(lines) + "\n"


def frame_to_markdown(df: pd.DataFrame) -> str:
    return to_markdown([str(c) for c in df.columns], df.values.tolist())


def table_to_markdown(table: Table, matrix: dict[tuple[str, int], Any]) -> str:
    df = matrix_to_frame(matrix, get_column_headers(table),
                         row_count=table.data_row_count)
    return f"### {table.name} ({table.area})\n\n" + frame_to_markdown(df)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def to_json(data: Any, pretty: bool = True) -> str:
    """Serialise *data* to JSON; non-JSON scalars (dates) become strings."""
    indent = 2 if pretty else None
    return json.dumps(data, indent=indent, default=str)
