from dataclasses import dataclass

import pytest

from structargs import InvalidBooleanValueError, MissingValueError, parse


@dataclass(kw_only=True)
class Flags:
    verbose: bool | None = False
    color: bool | None = True
    force: bool | None = None


@dataclass
class Enabled:
    enabled: bool


@pytest.mark.parametrize(
    "arguments, expected",
    [
        (["p"], False),
        (["p", "--verbose"], True),
        (["p", "--verbose", "--verbose"], False),
        (["p", "-v", "-v", "-v"], True),
    ],
)
def test_flag_toggles(arguments, expected):
    assert parse(Flags, arguments).verbose is expected


def test_flag_with_true_default_toggles_off():
    assert parse(Flags, ["p", "--color"]).color is False
    assert parse(Flags, ["p"]).color is True


def test_flag_does_not_consume_a_value():
    options = parse(Flags, ["p", "--verbose", "--color"])
    assert options.verbose is True
    assert options.color is False


@pytest.mark.parametrize(
    "value, expected",
    [("yes", True), ("on", True), ("1", True), ("FALSE", False), ("off", False)],
)
def test_bool_without_default_reads_a_value(value, expected):
    assert parse(Flags, ["p", "--force", value]).force is expected


def test_bool_without_default_toggles_after_first_value():
    assert parse(Flags, ["p", "--force", "yes", "--force"]).force is False


def test_bool_without_default_requires_value():
    assert parse(Flags, ["p"]).force is None
    with pytest.raises(MissingValueError):
        parse(Flags, ["p", "--force"])


def test_invalid_bool_value():
    with pytest.raises(InvalidBooleanValueError) as excinfo:
        parse(Flags, ["p", "--force", "maybe"])
    assert excinfo.value.token == "maybe"
    assert excinfo.value.field == "force"


def test_positional_bool():
    assert parse(Enabled, ["p", "off"]).enabled is False
    assert parse(Enabled, ["p", "True"]).enabled is True
    with pytest.raises(InvalidBooleanValueError):
        parse(Enabled, ["p", "enabled"])
