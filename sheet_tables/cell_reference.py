"""
A1-style cell references.

Converts between textual addresses such as ``"C5"`` or ``"AB12"`` and
1-based ``(column, row)`` index pairs.  Column letters use the bijective
base-26 scheme of the spreadsheet format (``A`` = 1, ``Z`` = 26,
``AA`` = 27); the heavy lifting is delegated to ``openpyxl.utils``.
"""

import re
from dataclasses import dataclass

from openpyxl.utils import get_column_letter, column_index_from_string

from .errors import MalformedAddress

MAX_COLUMN = 16384    # XFD
MAX_ROW = 1048576

_REFERENCE_RE = re.compile(r'^([A-Za-z]+)([0-9]+)$')


@dataclass(frozen=True, order=True)
class Coordinate:
    """A 1-based ``(column, row)`` position on a worksheet."""
    column: int
    row: int

    def __post_init__(self):
        if not 1 <= self.column <= MAX_COLUMN:
            raise MalformedAddress(
                (self.column, self.row),
                f"column index must lie in 1..{MAX_COLUMN}",
            )
        if not 1 <= self.row <= MAX_ROW:
            raise MalformedAddress(
                (self.column, self.row),
                f"row index must lie in 1..{MAX_ROW}",
            )

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        return parse_coordinate(text)

    @property
    def column_letter(self) -> str:
        return get_column_letter(self.column)

    def __str__(self):
        return f"{get_column_letter(self.column)}{self.row}"


def parse_coordinate(text: str) -> Coordinate:
    """Decode an A1-style address into a :class:`Coordinate`.

    Lowercase letters are accepted (``"b7"`` == ``"B7"``).  Anything not
    matching ``[A-Za-z]+[0-9]+`` raises :class:`MalformedAddress`.
    """
    if not isinstance(text, str):
        raise MalformedAddress(text, "expected a string")
    m = _REFERENCE_RE.match(text)
    if not m:
        raise MalformedAddress(text, "expected letters followed by digits")
    letters, digits = m.group(1), m.group(2)
    try:
        column = column_index_from_string(letters)
    except ValueError:
        raise MalformedAddress(text, f"column {letters.upper()!r} is out of range")
    return Coordinate(column, int(digits))


def format_coordinate(coordinate: Coordinate) -> str:
    """Encode a :class:`Coordinate` as an A1-style address."""
    return str(coordinate)


def as_coordinate(reference) -> Coordinate:
    """Accept either a :class:`Coordinate` or its text form."""
    if isinstance(reference, Coordinate):
        return reference
    return parse_coordinate(reference)


def to_indices(reference) -> tuple[int, int]:
    """Return the 1-based ``(column, row)`` indices of *reference*."""
    c = as_coordinate(reference)
    return c.column, c.row


def of_indices(column: int, row: int) -> str:
    """Return the A1-style address for 1-based *column* and *row*."""
    return str(Coordinate(column, row))


def move_coordinate_horizontal(amount: int, reference) -> Coordinate:
    """Shift *reference* by *amount* columns (positive moves right)."""
    c = as_coordinate(reference)
    return Coordinate(c.column + amount, c.row)


def move_coordinate_vertical(amount: int, reference) -> Coordinate:
    """Shift *reference* by *amount* rows (positive moves down)."""
    c = as_coordinate(reference)
    return Coordinate(c.column, c.row + amount)
