"""Sheet tables.

Named rectangular table regions over a sparse worksheet grid:

  * **Cell references** - A1-style addresses <-> 1-based indices.
  * **Regions** - ``"B2:D10"`` style areas with boundary queries,
    containment tests, moves and extensions.
  * **Tables** - a name, a region and ordered column headers.
  * **Values** - column, indexed, key/value and sparse-matrix views of a
    table's cells, read through a sparse grid accessor.
"""

from .area import (
    Region,
    RegionCheck,
    check_region,
    extend_left,
    extend_right,
    is_correct,
    move_horizontal,
    move_vertical,
    of_boundaries,
    reference_exceeds_area,
    to_boundaries,
)
from .cell_reference import Coordinate, format_coordinate, parse_coordinate
from .errors import (
    DuplicateHeader,
    InvalidRegion,
    MalformedAddress,
    MissingHeader,
    MissingRequiredValue,
    SheetTablesError,
)
from .grid import FrameGrid, MappingGrid, WorksheetGrid
from .table import (
    Table,
    TableColumn,
    create_table,
    create_with_headers,
    get_column_headers,
    try_create_with_headers,
    try_get_column_by,
    try_get_column_by_name,
)
from .values import (
    try_get_column_values_by_header,
    try_get_indexed_column_values_by_header,
    try_get_key_values_by_headers,
    to_sparse_matrix,
)
from .worksheet import list_tables, try_get_by_name, try_get_by_name_by

__all__ = [
    "Coordinate", "parse_coordinate", "format_coordinate",
    "Region", "RegionCheck", "of_boundaries", "to_boundaries",
    "move_horizontal", "move_vertical", "extend_left", "extend_right",
    "reference_exceeds_area", "check_region", "is_correct",
    "SheetTablesError", "MalformedAddress", "InvalidRegion",
    "MissingHeader", "MissingRequiredValue", "DuplicateHeader",
    "MappingGrid", "WorksheetGrid", "FrameGrid",
    "Table", "TableColumn", "create_table", "create_with_headers",
    "try_create_with_headers", "get_column_headers",
    "try_get_column_by", "try_get_column_by_name",
    "try_get_column_values_by_header",
    "try_get_indexed_column_values_by_header",
    "try_get_key_values_by_headers", "to_sparse_matrix",
    "list_tables", "try_get_by_name", "try_get_by_name_by",
]
