#!/usr/bin/env python
"""
Sheet tables - command line entry point.

Usage:
    # List the tables defined in a workbook
    python -m sheet_tables.main tables <excel_file> [--sheet Sheet1]

    # Values of one column (empty cells skipped, or indexed)
    python -m sheet_tables.main column <excel_file> <table> <header> [--indexed]

    # Key/value pairs from two columns
    python -m sheet_tables.main keyvalues <excel_file> <table> <key> <value> [--default X]

    # Whole table as a sparse matrix
    python -m sheet_tables.main matrix <excel_file> <table> [--format json|markdown|csv]

    # Define a table over an area, taking column names from its first row
    python -m sheet_tables.main create <excel_file> <sheet> <name> <area> [--output out.xlsx]
"""

import argparse
import logging
import os
import sys

from sheet_tables.config import load_config
from sheet_tables.errors import SheetTablesError
from sheet_tables.formatters import (
    matrix_records,
    matrix_to_frame,
    table_summary,
    table_to_markdown,
    to_json,
)
from sheet_tables.grid import WorksheetGrid
from sheet_tables.table import create_with_headers, get_column_headers
from sheet_tables.values import (
    get_column_values_by_header,
    try_get_indexed_column_values_by_header,
    try_get_key_values_by_headers,
    to_sparse_matrix,
)
from sheet_tables.worksheet import add_table, find_table, list_tables, open_workbook

logger = logging.getLogger(__name__)


def setup_logging(level_str: str = "INFO"):
    """Configure logging."""
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Read named tables from Excel worksheets"
    )
    parser.add_argument("--config", default=None, help="Path to config YAML file")
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # ---- tables ----
    p_tables = sub.add_parser("tables", help="List tables in a workbook")
    p_tables.add_argument("excel_file", help="Path to the Excel file (.xlsx)")
    p_tables.add_argument("--sheet", default=None, help="Only this sheet")

    # ---- column ----
    p_col = sub.add_parser("column", help="Print the values of one column")
    p_col.add_argument("excel_file")
    p_col.add_argument("table")
    p_col.add_argument("header")
    p_col.add_argument("--sheet", default=None)
    p_col.add_argument(
        "--indexed", action="store_true",
        help="Pair each value with its 0-based data row offset",
    )

    # ---- keyvalues ----
    p_kv = sub.add_parser("keyvalues", help="Pair a key column with a value column")
    p_kv.add_argument("excel_file")
    p_kv.add_argument("table")
    p_kv.add_argument("key")
    p_kv.add_argument("value")
    p_kv.add_argument("--sheet", default=None)
    p_kv.add_argument(
        "--default", default=None,
        help="Substitute for empty value cells (default from config)",
    )

    # ---- matrix ----
    p_mat = sub.add_parser("matrix", help="Read a whole table")
    p_mat.add_argument("excel_file")
    p_mat.add_argument("table")
    p_mat.add_argument("--sheet", default=None)
    p_mat.add_argument(
        "--format", dest="output_format", default=None,
        choices=["json", "markdown", "csv"],
    )

    # ---- create ----
    p_new = sub.add_parser(
        "create", help="Define a table whose headers are the area's first row",
    )
    p_new.add_argument("excel_file")
    p_new.add_argument("sheet")
    p_new.add_argument("name")
    p_new.add_argument("area", help='A1-style area, e.g. "B2:D10"')
    p_new.add_argument(
        "--output", default=None,
        help="Where to save the workbook (default: overwrite the input)",
    )
    return parser


def run(args, config) -> str:
    """Execute a parsed command and return the text to print."""
    data_only = config["data_only"]

    if args.command == "tables":
        wb = open_workbook(args.excel_file, data_only=data_only)
        names = [args.sheet] if args.sheet else wb.sheetnames
        result = {}
        for name in names:
            if name not in wb.sheetnames:
                wb.close()
                raise LookupError(f"Sheet '{name}' not found in {args.excel_file}")
            result[name] = [table_summary(t) for t in list_tables(wb[name])]
        wb.close()
        return to_json(result)

    if args.command == "create":
        wb = open_workbook(args.excel_file, data_only=False)
        if args.sheet not in wb.sheetnames:
            wb.close()
            raise LookupError(f"Sheet '{args.sheet}' not found in {args.excel_file}")
        ws = wb[args.sheet]
        table = create_with_headers(WorksheetGrid(ws), args.name, args.area)
        add_table(ws, table, write_headers=False)
        output = args.output or args.excel_file
        wb.save(output)
        wb.close()
        logger.info(f"Saved: {output}")
        return to_json(table_summary(table))

    table, grid = find_table(args.excel_file, args.table, args.sheet,
                             data_only=data_only)

    if args.command == "column":
        if args.indexed:
            values = try_get_indexed_column_values_by_header(grid, args.header, table)
            if values is None:
                raise LookupError(f"No column '{args.header}' in table '{table.name}'")
            return to_json([{"row": i, "value": v} for i, v in values])
        return to_json(get_column_values_by_header(grid, args.header, table))

    if args.command == "keyvalues":
        default = args.default if args.default is not None else config["default_value"]
        pairs = try_get_key_values_by_headers(grid, args.key, args.value, default, table)
        if pairs is None:
            raise LookupError(
                f"Table '{table.name}' needs both '{args.key}' and '{args.value}' columns")
        return to_json([{"key": k, "value": v} for k, v in pairs])

    if args.command == "matrix":
        matrix = to_sparse_matrix(grid, table)
        fmt = args.output_format or config["output_format"]
        if fmt == "markdown":
            return table_to_markdown(table, matrix)
        if fmt == "csv":
            df = matrix_to_frame(matrix, get_column_headers(table),
                                 row_count=table.data_row_count)
            return df.to_csv(index=False)
        return to_json(matrix_records(matrix))

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    setup_logging(args.log_level or config["log_level"])

    if not os.path.exists(args.excel_file):
        print(f"Error: File '{args.excel_file}' not found.")
        sys.exit(1)

    try:
        output = run(args, config)
    except (SheetTablesError, LookupError, ValueError) as err:
        print(f"Error: {err}")
        sys.exit(1)
    print(output)


if __name__ == "__main__":
    main()
