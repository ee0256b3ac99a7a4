from dataclasses import dataclass

import pytest

from structargs import ParserConfig, UnknownOptionError, parse


@dataclass(kw_only=True)
class Offsets:
    x: float
    offset: int | None = None
    scale: list[float] | None = None


@pytest.mark.parametrize(
    "token, expected",
    [("-3", -3.0), ("-3.14", -3.14), ("-.5", -0.5), ("-1e5", -100000.0)],
)
def test_negative_positional(token, expected):
    assert parse(Offsets, ["p", token]).x == expected


def test_negative_option_value():
    options = parse(Offsets, ["p", "--offset", "-5", "1"])
    assert options.offset == -5
    assert options.x == 1.0


def test_negative_sequence_values():
    options = parse(Offsets, ["p", "--scale", "-1", "2", "-0.5", "--offset", "3", "0"])
    assert options.scale == [-1.0, 2.0, -0.5]
    assert options.offset == 3


def test_negative_numbers_as_options():
    config = ParserConfig(allow_negative_numbers=False)
    with pytest.raises(UnknownOptionError) as excinfo:
        parse(Offsets, ["p", "-3"], config=config)
    assert excinfo.value.token == "-3"
