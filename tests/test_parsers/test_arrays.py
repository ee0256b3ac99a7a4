from dataclasses import dataclass
from itertools import cycle, islice
from typing import Annotated

import pytest

from structargs import (
    Array,
    InvalidScalarConversionError,
    Length,
    MissingValueError,
    TooFewArrayElementsError,
    parse,
)


@dataclass
class Cube:
    value: Array[Array[Array[float, 3], 4], 4]


@dataclass(kw_only=True)
class Point:
    point: Array[float, 3]
    verbose: bool | None = False


@dataclass
class Origin:
    origin: Array[int, 2] | None = None


@dataclass
class Pair:
    coords: Annotated[tuple[int, ...], Length(2)]


def test_three_dimensional_array_fills_row_major():
    tokens = list(islice(cycle(["0", "0.51", "0.35"]), 48))
    options = parse(Cube, ["./main", *tokens])

    flat = [value for plane in options.value for row in plane for value in row]
    assert flat == list(islice(cycle([0.0, 0.51, 0.35]), 48))
    assert len(options.value) == 4
    assert all(len(plane) == 4 for plane in options.value)
    assert all(len(row) == 3 for plane in options.value for row in plane)
    assert options.value[0][0] == [0.0, 0.51, 0.35]
    assert options.value[0][1] == [0.0, 0.51, 0.35]


def test_array_positional():
    assert parse(Point, ["p", "1", "2", "3"]).point == [1.0, 2.0, 3.0]


def test_array_accepts_negative_numbers():
    assert parse(Point, ["p", "-1", "-2.5", "3"]).point == [-1.0, -2.5, 3.0]


def test_array_too_few_elements():
    with pytest.raises(TooFewArrayElementsError) as excinfo:
        parse(Point, ["p", "1", "2"])
    assert excinfo.value.field == "point"
    assert excinfo.value.expected == 3
    assert isinstance(excinfo.value, MissingValueError)


def test_array_stops_at_option():
    with pytest.raises(TooFewArrayElementsError):
        parse(Point, ["p", "1", "2", "--verbose", "3"])


def test_array_invalid_element():
    with pytest.raises(InvalidScalarConversionError) as excinfo:
        parse(Point, ["p", "1", "x", "3"])
    assert excinfo.value.token == "x"


def test_optional_array():
    assert parse(Origin, ["p", "--origin", "4", "5"]).origin == [4, 5]
    assert parse(Origin, ["p"]).origin is None
    with pytest.raises(MissingValueError):
        parse(Origin, ["p", "--origin"])


def test_tuple_container():
    assert parse(Pair, ["p", "7", "8"]).coords == (7, 8)
