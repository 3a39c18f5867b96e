"""
Rectangular regions ("areas") of a worksheet.

A region is stored as its top-left and bottom-right corners and
serialised in the host file format's attribute syntax, e.g. ``"B2:D10"``.
Corners are parsed once; the four boundaries are plain integers.

All functions accept either a :class:`Region` or its text form, and
either a :class:`~sheet_tables.cell_reference.Coordinate` or an A1-style
string for references.  Nothing here mutates its input: moves and
extensions return a new :class:`Region`.
"""

import logging
from dataclasses import dataclass

from .cell_reference import (
    Coordinate,
    as_coordinate,
    move_coordinate_horizontal,
    move_coordinate_vertical,
)
from .errors import InvalidRegion, MalformedAddress

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """Rectangle spanned by ``start`` (top-left) and ``end`` (bottom-right).

    Construction does not reject inverted corners; use :func:`check_region`
    or :func:`is_correct` to find out whether a region is usable.
    """
    start: Coordinate
    end: Coordinate

    @classmethod
    def parse(cls, text: str) -> "Region":
        """Parse ``"<from>:<to>"``.  Raises :class:`MalformedAddress`."""
        if not isinstance(text, str):
            raise MalformedAddress(text, "expected a region string")
        parts = text.split(":")
        if len(parts) != 2:
            raise MalformedAddress(text, "expected exactly one ':' separator")
        return cls(as_coordinate(parts[0]), as_coordinate(parts[1]))

    @property
    def left(self) -> int:
        return self.start.column

    @property
    def right(self) -> int:
        return self.end.column

    @property
    def upper(self) -> int:
        return self.start.row

    @property
    def lower(self) -> int:
        return self.end.row

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.lower - self.upper + 1

    def __str__(self):
        return f"{self.start}:{self.end}"


@dataclass(frozen=True)
class RegionCheck:
    """Outcome of validating a region: a flag plus human-readable causes."""
    valid: bool
    problems: tuple = ()

    def __bool__(self):
        return self.valid


def as_region(area) -> Region:
    if isinstance(area, Region):
        return area
    return Region.parse(area)


# ---------------------------------------------------------------------------
# Construction / projection
# ---------------------------------------------------------------------------

def of_boundaries(from_reference, to_reference) -> Region:
    """Build a region from its top-left and bottom-right references."""
    return Region(as_coordinate(from_reference), as_coordinate(to_reference))


def to_boundaries(area) -> tuple[Coordinate, Coordinate]:
    """Return the ``(from, to)`` corners of *area*."""
    r = as_region(area)
    return r.start, r.end


def left_boundary(area) -> int:
    return as_region(area).left


def right_boundary(area) -> int:
    return as_region(area).right


def upper_boundary(area) -> int:
    return as_region(area).upper


def lower_boundary(area) -> int:
    return as_region(area).lower


# ---------------------------------------------------------------------------
# Moving and extending
# ---------------------------------------------------------------------------

def move_horizontal(amount: int, area) -> Region:
    """Shift both corners by *amount* columns (positive moves right)."""
    r = as_region(area)
    return Region(move_coordinate_horizontal(amount, r.start),
                  move_coordinate_horizontal(amount, r.end))


def move_vertical(amount: int, area) -> Region:
    """Shift both corners by *amount* rows (positive moves down)."""
    r = as_region(area)
    return Region(move_coordinate_vertical(amount, r.start),
                  move_coordinate_vertical(amount, r.end))


def extend_right(amount: int, area) -> Region:
    """Move the right boundary by *amount* columns; the left edge stays."""
    r = as_region(area)
    return Region(r.start, move_coordinate_horizontal(amount, r.end))


def extend_left(amount: int, area) -> Region:
    """Move the left boundary left by *amount* columns; the right edge stays.

    A negative *amount* shrinks the region from the left.
    """
    r = as_region(area)
    return Region(move_coordinate_horizontal(-amount, r.start), r.end)


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def reference_exceeds_area_right(reference, area) -> bool:
    """True if the reference's column lies right of the region."""
    return as_coordinate(reference).column > as_region(area).right


def reference_exceeds_area_left(reference, area) -> bool:
    """True if the reference's column lies left of the region."""
    return as_coordinate(reference).column < as_region(area).left


def reference_exceeds_area_above(reference, area) -> bool:
    """True if the reference's row lies above the region."""
    return as_coordinate(reference).row < as_region(area).upper


def reference_exceeds_area_below(reference, area) -> bool:
    """True if the reference's row lies below the region."""
    return as_coordinate(reference).row > as_region(area).lower


def reference_exceeds_area(reference, area) -> bool:
    """True if the reference does not lie inside the region."""
    c = as_coordinate(reference)
    r = as_region(area)
    return (reference_exceeds_area_right(c, r)
            or reference_exceeds_area_left(c, r)
            or reference_exceeds_area_above(c, r)
            or reference_exceeds_area_below(c, r))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def check_region(area) -> RegionCheck:
    """Validate *area* and report every problem found.

    Never raises: unparsable text is reported as a problem.
    """
    try:
        r = as_region(area)
    except MalformedAddress as err:
        return RegionCheck(False, (f"Area {str(area)!r} could not be parsed: {err}",))

    problems = []
    if r.left > r.right:
        problems.append(
            "Right area boundary must be higher or equal to left area boundary")
    if r.upper > r.lower:
        problems.append(
            "Lower area boundary must be higher or equal to upper area boundary")
    return RegionCheck(not problems, tuple(problems))


def is_correct(area) -> bool:
    """Return True if *area* is a well-formed region; log why if not."""
    result = check_region(area)
    for problem in result.problems:
        logger.warning(problem)
    return result.valid


def require_correct(area) -> Region:
    """Return *area* as a :class:`Region`, raising :class:`InvalidRegion`
    if it is malformed."""
    result = check_region(area)
    if not result.valid:
        raise InvalidRegion(area, result.problems)
    return as_region(area)
