import pytest

from structargs.parser.tokens import (
    is_negative_number,
    is_option_like,
    is_sentinel,
    matches_field,
    matches_field_alphanumeric_normalized,
    matches_field_as_long,
    matches_field_as_short,
    normalize,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--verbose", True),
        ("-v", True),
        ("-vx", True),
        ("--input-file", True),
        ("file.txt", False),
        ("-", False),
        ("--", False),
        ("", False),
        ("-3", False),
        ("-3.14", False),
        ("-.5", False),
        ("-1e5", False),
        ("-3x", True),
    ],
)
def test_is_option_like(token, expected):
    assert is_option_like(token) is expected


def test_is_option_like_after_double_dash():
    assert is_option_like("--verbose", double_dash_seen=True) is False
    assert is_option_like("-v", double_dash_seen=True) is False


def test_negative_numbers_can_be_options():
    assert is_option_like("-3", allow_negative_numbers=False) is True
    assert is_option_like("-3.14", allow_negative_numbers=False) is True


def test_is_negative_number():
    assert is_negative_number("-42")
    assert is_negative_number("-0.51")
    assert not is_negative_number("42")
    assert not is_negative_number("-x")
    assert not is_negative_number("-")


def test_is_sentinel():
    assert is_sentinel("--")
    assert not is_sentinel("---")
    assert not is_sentinel("-")


def test_normalize():
    assert normalize("--input-file") == "inputfile"
    assert normalize("input_file") == "inputfile"
    assert normalize("-v") == "v"
    assert normalize("--") == ""


def test_matches_field_forms():
    assert matches_field_as_long("--input_file", "input_file")
    assert not matches_field_as_long("--input-file", "input_file")
    assert matches_field_as_short("-i", "input_file")
    assert not matches_field_as_short("-n", "input_file")
    assert matches_field_alphanumeric_normalized("--input-file", "input_file")
    assert matches_field_alphanumeric_normalized("--inputfile", "input_file")
    assert not matches_field_alphanumeric_normalized("--", "input_file")


def test_matches_field_is_case_sensitive():
    assert not matches_field("--Verbose", "verbose")
    assert not matches_field("-V", "verbose")
    assert matches_field("--verbose", "verbose")
    assert matches_field("-v", "verbose")
