"""Tests for A1-style cell reference parsing and formatting."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sheet_tables.cell_reference import (
    MAX_COLUMN,
    MAX_ROW,
    Coordinate,
    format_coordinate,
    move_coordinate_horizontal,
    move_coordinate_vertical,
    of_indices,
    parse_coordinate,
    to_indices,
)
from sheet_tables.errors import MalformedAddress, SheetTablesError


@pytest.mark.parametrize("text, column, row", [
    ("A1", 1, 1),
    ("Z9", 26, 9),
    ("AA27", 27, 27),
    ("AZ3", 52, 3),
    ("BA3", 53, 3),
    ("ZZ100", 702, 100),
    ("AAA1", 703, 1),
    ("XFD1048576", MAX_COLUMN, MAX_ROW),
])
def test_parse(text, column, row):
    assert parse_coordinate(text) == Coordinate(column, row)


def test_parse_accepts_lowercase():
    assert parse_coordinate("ab12") == Coordinate(28, 12)


@pytest.mark.parametrize("text", [
    "", "A", "1", "1A", "A1B", "A-1", " A1", "A1 ", "$A$1", "A0", "XFE1",
    "A1048577",
])
def test_parse_rejects_malformed(text):
    with pytest.raises(MalformedAddress):
        parse_coordinate(text)


def test_parse_rejects_non_string():
    with pytest.raises(MalformedAddress):
        parse_coordinate(11)


def test_malformed_address_is_value_error():
    with pytest.raises(ValueError):
        parse_coordinate("??")
    assert issubclass(MalformedAddress, SheetTablesError)


@pytest.mark.parametrize("column, row", [
    (1, 1), (26, 1), (27, 5), (52, 8), (53, 13), (702, 1), (703, 2),
    (16384, 1048576), (18 * 26 + 3, 44),
])
def test_round_trip(column, row):
    c = Coordinate(column, row)
    assert parse_coordinate(format_coordinate(c)) == c


def test_round_trip_across_letter_widths():
    for column in range(1, 1000):
        c = Coordinate(column, column)
        assert parse_coordinate(str(c)) == c


def test_format():
    assert format_coordinate(Coordinate(28, 12)) == "AB12"
    assert Coordinate(3, 5).column_letter == "C"
    assert of_indices(3, 5) == "C5"


def test_coordinate_rejects_out_of_range_indices():
    with pytest.raises(MalformedAddress):
        Coordinate(0, 1)
    with pytest.raises(MalformedAddress):
        Coordinate(1, 0)
    with pytest.raises(MalformedAddress):
        Coordinate(MAX_COLUMN + 1, 1)


def test_to_indices_accepts_text_or_coordinate():
    assert to_indices("C5") == (3, 5)
    assert to_indices(Coordinate(3, 5)) == (3, 5)


def test_moves():
    assert str(move_coordinate_horizontal(2, "B2")) == "D2"
    assert str(move_coordinate_horizontal(-1, "B2")) == "A2"
    assert str(move_coordinate_vertical(3, "B2")) == "B5"
    assert str(move_coordinate_vertical(-1, "B2")) == "B1"


def test_move_off_grid_raises():
    with pytest.raises(MalformedAddress):
        move_coordinate_horizontal(-1, "A1")
    with pytest.raises(MalformedAddress):
        move_coordinate_vertical(-1, "A1")
