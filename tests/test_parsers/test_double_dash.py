from dataclasses import dataclass

import pytest

from structargs import MissingValueError, parse


@dataclass(kw_only=True)
class Named:
    name: str
    verbose: bool | None = False
    output: str | None = None


@dataclass
class Add:
    files: list[str]


@dataclass(kw_only=True)
class WithSubcommand:
    name: str
    add: Add | None = None


@dataclass
class TwoLists:
    files: list[str]
    rest: list[str]


def test_options_after_double_dash_are_positional():
    options = parse(Named, ["p", "--", "--verbose"])
    assert options.name == "--verbose"
    assert options.verbose is False


def test_options_before_double_dash_still_match():
    options = parse(Named, ["p", "-v", "--", "-o"])
    assert options == Named(name="-o", verbose=True, output=None)


def test_second_double_dash_is_a_value():
    assert parse(Named, ["p", "--", "--"]).name == "--"


def test_trailing_double_dash():
    assert parse(Named, ["p", "x", "--"]).name == "x"


def test_option_value_cannot_be_double_dash():
    with pytest.raises(MissingValueError):
        parse(Named, ["p", "--output", "--", "x"])


def test_sequence_stops_at_double_dash():
    options = parse(TwoLists, ["p", "a", "b", "--", "c", "-d"])
    assert options.files == ["a", "b"]
    assert options.rest == ["c", "-d"]


def test_subcommand_name_after_double_dash_is_positional():
    options = parse(WithSubcommand, ["p", "--", "add"])
    assert options.name == "add"
    assert options.add is None
