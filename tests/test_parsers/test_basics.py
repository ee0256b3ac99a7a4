from dataclasses import dataclass

import pytest

from structargs import (
    MissingRequiredPositionalError,
    RecordParser,
    build_schema,
    field,
    parse,
)


@dataclass(kw_only=True)
class GrepOptions:
    v: bool | None = False
    search: str
    pathspec: str


@dataclass
class Verbose:
    verbose: bool | None = False


@dataclass
class InputFile:
    input_file: str | None = None


@dataclass(kw_only=True)
class Files:
    files: list[str]
    verbose: bool | None = False


@dataclass
class Greeting:
    name: str = field(help="Who to greet.")


@dataclass(kw_only=True)
class Interleaved:
    verbose: bool | None = False
    output: str | None = None
    first: str
    second: str


def test_double_dash_delimiter():
    options = parse(GrepOptions, ["grep", "--", "-v", "file.csv"])
    assert options == GrepOptions(v=False, search="-v", pathspec="file.csv")


def test_boolean_flag_toggle():
    assert parse(Verbose, ["prog", "--verbose"]).verbose is True
    assert parse(Verbose, ["prog"]).verbose is False


@pytest.mark.parametrize(
    "arguments",
    [
        ["p", "-i", "a.txt"],
        ["p", "--input-file", "a.txt"],
        ["p", "--inputfile", "a.txt"],
        ["p", "--input_file", "a.txt"],
    ],
)
def test_short_form_and_normalization(arguments):
    assert parse(InputFile, arguments).input_file == "a.txt"


def test_optional_without_value_given_is_default():
    assert parse(InputFile, ["p"]).input_file is None


def test_sequence_positional_ends_at_next_option():
    options = parse(Files, ["p", "a", "b", "c", "--verbose"])
    assert options.files == ["a", "b", "c"]
    assert options.verbose is True


def test_missing_required_positional():
    with pytest.raises(MissingRequiredPositionalError) as excinfo:
        parse(Greeting, ["p"])
    assert excinfo.value.field == "name"
    assert "name" in str(excinfo.value)
    assert "Who to greet." in str(excinfo.value)


def test_options_and_positionals_interleave():
    options = parse(Interleaved, ["prog", "--verbose", "foo", "-o", "out", "bar"])
    assert options == Interleaved(
        verbose=True, output="out", first="foo", second="bar"
    )


def test_program_name_is_skipped():
    assert parse(Greeting, ["greet", "world"]).name == "world"
    assert parse(Greeting, ["world", "greet"]).name == "greet"


def test_empty_vector():
    assert parse(Verbose, []).verbose is False


def test_record_parser_directly():
    parser = RecordParser(build_schema(Interleaved), ["prog", "a", "b"])
    options = parser.parse()
    assert options.first == "a" and options.second == "b"
    assert parser.cursor == 3
    assert parser.tokens_consumed == 2
    assert not parser.pending_positionals
    assert str(parser) == (
        "RecordParser(Interleaved, cursor=3, double_dash_seen=False, pending=[])"
    )
