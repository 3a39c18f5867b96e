"""
Create a sample Excel workbook with table definitions for the tests.

This workbook has:
- Inventory: table "Stock" at B2:D6 with a gap in the Qty column
- Rates:     table "RateTable" at A1:B4 with a missing rate
- Empty:     table "HeaderOnly" at A1:B1 (no data rows)
"""

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.worksheet.table import Table, TableStyleInfo


def create_sample_workbook(output_path):
    """Create a multi-sheet workbook with tables and sparse cells."""
    wb = Workbook()

    # ---- Inventory ----
    ws1 = wb.active
    ws1.title = "Inventory"
    ws1["A1"] = "Stock list"
    ws1["A1"].font = Font(bold=True)

    ws1["B2"] = "Item"
    ws1["C2"] = "Qty"
    ws1["D2"] = "Price"

    ws1["B3"] = "Widget A"
    ws1["C3"] = 5
    ws1["D3"] = 10.5

    ws1["B4"] = "Widget B"
    # C4 left empty
    ws1["D4"] = 25.0

    ws1["B5"] = "Widget C"
    ws1["C5"] = 10
    ws1["D5"] = 7.25

    ws1["B6"] = "Widget D"
    ws1["C6"] = 2
    # D6 left empty

    stock = Table(displayName="Stock", ref="B2:D6")
    stock.tableStyleInfo = TableStyleInfo(name="TableStyleMedium9",
                                          showRowStripes=True)
    ws1.add_table(stock)

    # ---- Rates ----
    ws2 = wb.create_sheet("Rates")
    ws2["A1"] = "Code"
    ws2["B1"] = "Rate"
    ws2["A2"] = "USD"
    ws2["B2"] = 1.0
    ws2["A3"] = "EUR"
    # B3 left empty
    ws2["A4"] = "GBP"
    ws2["B4"] = 1.27
    ws2.add_table(Table(displayName="RateTable", ref="A1:B4"))

    # ---- Empty ----
    ws3 = wb.create_sheet("Empty")
    ws3["A1"] = "Key"
    ws3["B1"] = "Value"
    ws3.add_table(Table(displayName="HeaderOnly", ref="A1:B1"))

    wb.save(output_path)
    wb.close()
    return output_path
