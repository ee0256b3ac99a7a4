# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `RecordParser`, the parse driver that turns an argument
vector into an instance of a user's dataclass.

The driver makes a single left-to-right pass over the tokens. At each cursor
position it consumes a `--` sentinel if present, then offers the token to every
field of the schema in declaration order until one of three visitors consumes
it:

- nested record fields take a bare token equal to their name (a subcommand) and
  hand the rest of the vector to a sub-parser;
- positional fields take non-option tokens in declaration order, tracked by a
  queue of pending positional names;
- optional fields take option-like tokens that match `--name`, `-n` or the
  alphabetic normalization of the name, then read their value.

Each per-kind value parser advances the cursor by the number of tokens it
consumes: one for scalars and enumerations, N for fixed arrays, as many as are
available for sequences.

Example Usage:
    @dataclass
    class Options:
        input_file: str
        verbose: bool | None = False

    schema = build_schema(Options)
    options = RecordParser(schema, ["prog", "--verbose", "in.txt"]).parse()

    # options == Options(input_file="in.txt", verbose=True)

Design Notes:
Parsing is fail-fast: the first `ArgumentError` propagates out of `parse()`.
Help and version requests end the parse with `HelpSignal` / `VersionSignal`.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Sequence

from structargs.config import DEFAULT_CONFIG, ParserConfig
from structargs.exceptions import (
    ArgumentError,
    InvalidBooleanValueError,
    InvalidEnumValueError,
    InvalidScalarConversionError,
    MissingRequiredPositionalError,
    MissingValueError,
    TooFewArrayElementsError,
    UnexpectedPositionalError,
    UnknownOptionError,
)
from structargs.logger import logger
from structargs.parser.field import FieldDescriptor
from structargs.parser.field_kind import FieldKind
from structargs.parser.schema import Schema, build_schema
from structargs.parser.tokens import is_option_like, is_sentinel, matches_field
from structargs.parser.utils import coerce_bool, coerce_enum, coerce_literal, coerce_value
from structargs.signals import HelpSignal, VersionSignal


class RecordParser:
    """
    Parse driver for one record type over one argument vector.

    A `RecordParser` is built per parse call and discarded afterwards. At the top
    level, element 0 of the vector is the program name and is skipped; nested
    sub-parsers start at element 0 of the slice they are given.

    Attributes:
        schema (Schema): The record's schema.
        arguments (tuple[str, ...]): The argument vector, read-only.
        cursor (int): Index of the next token to consume; never decreases.
        double_dash_seen (bool): Set once `--` has been consumed; never reset.
        pending_positionals (deque[str]): Positional field names not yet bound.
        values (dict[str, Any]): Parsed values by field name.
    """

    def __init__(
        self,
        schema: Schema,
        arguments: Sequence[str],
        config: ParserConfig | None = None,
    ) -> None:
        self.schema: Schema = schema
        self.config: ParserConfig = config or DEFAULT_CONFIG
        self.arguments: tuple[str, ...] = tuple(arguments)
        self.start: int = 1 if schema.top_level else 0
        self.cursor: int = self.start
        self.double_dash_seen: bool = False
        self.pending_positionals: deque[str] = deque(schema.positional_field_names)
        self.values: dict[str, Any] = {}
        self.help_requested: bool = False
        self.version_requested: bool = False

    @property
    def tokens_consumed(self) -> int:
        """Number of tokens consumed so far, not counting a skipped program name."""
        return max(self.cursor - self.start, 0)

    @property
    def name(self) -> str:
        return self.schema.record_type.__name__

    def _advance(self, count: int = 1) -> None:
        assert count >= 0, "cursor must never move backwards"
        self.cursor += count

    def _current(self) -> str | None:
        if self.cursor < len(self.arguments):
            return self.arguments[self.cursor]
        return None

    def _is_option_like(self, token: str) -> bool:
        return is_option_like(
            token, self.double_dash_seen, self.config.allow_negative_numbers
        )

    def _is_subcommand(self, token: str) -> bool:
        return not self.double_dash_seen and token in self.schema.nested_field_names

    def _consume_sentinel(self) -> bool:
        token = self._current()
        if token is not None and not self.double_dash_seen and is_sentinel(token):
            self.double_dash_seen = True
            self._advance()
            logger.debug("[%s] '--' seen; remaining tokens are positional", self.name)
            return True
        return False

    def _has_value_token(self) -> bool:
        """True if the token at the cursor can be read as a value."""
        token = self._current()
        if token is None:
            return False
        if not self.double_dash_seen and is_sentinel(token):
            return False
        return not self._is_option_like(token)

    def _take_token(self, descriptor: FieldDescriptor) -> str:
        if not self._has_value_token():
            found = self._current()
            found_text = f", found '{found}'" if found is not None else ""
            raise MissingValueError(
                f"Expected a {descriptor.get_type_name()} value for '{descriptor.name}'"
                f"{found_text}",
                token=found,
                field=descriptor.name,
                expected=descriptor.get_type_name(),
            )
        token = self.arguments[self.cursor]
        self._advance()
        return token

    def _parse_value(self, descriptor: FieldDescriptor) -> Any:
        """Dispatch to the value parser for the descriptor's kind."""
        kind = descriptor.kind
        if kind == FieldKind.SCALAR:
            return self._parse_scalar(descriptor)
        elif kind == FieldKind.ENUMERATION:
            return self._parse_enum(descriptor)
        elif kind == FieldKind.OPTIONAL:
            return self._parse_value(descriptor.element)
        elif kind == FieldKind.FIXED_ARRAY:
            return self._parse_fixed_array(descriptor)
        elif kind == FieldKind.SEQUENCE:
            return self._parse_sequence(descriptor)
        elif kind in (FieldKind.PAIR, FieldKind.TUPLE):
            return self._parse_tuple(descriptor)
        elif kind == FieldKind.NESTED_RECORD:
            return self._parse_nested(descriptor)
        raise AssertionError(f"Unhandled field kind: {kind}")

    def _parse_scalar(self, descriptor: FieldDescriptor) -> Any:
        token = self._take_token(descriptor)
        if descriptor.type is bool:
            try:
                return coerce_bool(token)
            except ValueError as error:
                raise InvalidBooleanValueError(
                    f"Invalid value for '{descriptor.name}': {error}",
                    token=token,
                    field=descriptor.name,
                    expected="bool",
                ) from error
        try:
            return coerce_value(token, descriptor.type)
        except (ValueError, ArithmeticError) as error:
            raise InvalidScalarConversionError(
                f"Invalid value for '{descriptor.name}': {error}",
                token=token,
                field=descriptor.name,
                expected=descriptor.get_type_name(),
            ) from error

    def _parse_enum(self, descriptor: FieldDescriptor) -> Any:
        token = self._take_token(descriptor)
        try:
            if isinstance(descriptor.type, type):
                return coerce_enum(token, descriptor.type, by_value=False)
            return coerce_literal(token, descriptor.type)
        except ValueError as error:
            raise InvalidEnumValueError(
                f"Invalid value for '{descriptor.name}': {error}",
                token=token,
                field=descriptor.name,
                expected=descriptor.get_choices(),
            ) from error

    def _parse_fixed_array(self, descriptor: FieldDescriptor) -> Any:
        assert descriptor.length is not None, "fixed arrays always have a length"
        values = []
        for index in range(descriptor.length):
            if not self._has_value_token():
                raise TooFewArrayElementsError(
                    f"Expected {descriptor.length} values for '{descriptor.name}', "
                    f"got {index}",
                    token=self._current(),
                    field=descriptor.name,
                    expected=descriptor.length,
                )
            values.append(self._parse_value(descriptor.element))
        assert descriptor.container is not None
        return descriptor.container(values)

    def _parse_sequence(self, descriptor: FieldDescriptor) -> Any:
        values = []
        while self._has_value_token() and not self._is_subcommand(
            self.arguments[self.cursor]
        ):
            values.append(self._parse_value(descriptor.element))
        assert descriptor.container is not None
        return descriptor.container(values)

    def _parse_tuple(self, descriptor: FieldDescriptor) -> tuple[Any, ...]:
        return tuple([self._parse_value(element) for element in descriptor.elements])

    def _parse_nested(self, descriptor: FieldDescriptor) -> Any:
        schema = build_schema(descriptor.type, top_level=False, config=self.config)
        sub_parser = RecordParser(schema, self.arguments[self.cursor :], self.config)
        record = sub_parser.parse()
        self._advance(sub_parser.tokens_consumed)
        return record

    def _visit_nested(self, descriptor: FieldDescriptor, token: str) -> bool:
        if self._is_option_like(token) or not self._is_subcommand(token):
            return False
        if token != descriptor.name:
            return False
        logger.debug("[%s] Entering subcommand '%s'", self.name, descriptor.name)
        self._advance()
        self.values[descriptor.name] = self._parse_nested(descriptor)
        return True

    def _visit_positional(self, descriptor: FieldDescriptor, token: str) -> bool:
        if self._is_option_like(token) or self._is_subcommand(token):
            return False
        if not self.pending_positionals:
            return False
        if self.pending_positionals[0] != descriptor.name:
            return False

        name = self.pending_positionals.popleft()
        try:
            value = self._parse_value(descriptor)
        except ArgumentError:
            self.pending_positionals.appendleft(name)
            raise
        self.values[name] = value
        logger.debug("[%s] Bound positional '%s' = %r", self.name, name, value)
        return True

    def _visit_optional(self, descriptor: FieldDescriptor, token: str) -> bool:
        if not self._is_option_like(token) or not matches_field(token, descriptor.name):
            return False
        self._advance()

        current = self.values.get(descriptor.name)
        element = descriptor.element
        if element.type is bool and isinstance(current, bool):
            self.values[descriptor.name] = not current
            logger.debug(
                "[%s] Toggled flag '%s' to %s",
                self.name,
                descriptor.name,
                not current,
            )
            return True

        if element.kind != FieldKind.SEQUENCE and not self._has_value_token():
            raise MissingValueError(
                f"Option '{token}' requires a value: {descriptor.get_choice_text()}",
                token=token,
                field=descriptor.name,
                expected=element.get_type_name(),
            )
        value = self._parse_value(element)
        self.values[descriptor.name] = value
        logger.debug("[%s] Bound option '%s' = %r", self.name, descriptor.name, value)
        return True

    def _visit_synthetic(self, descriptor: FieldDescriptor, token: str) -> bool:
        if not self._is_option_like(token) or not matches_field(token, descriptor.name):
            return False
        self._advance()
        if descriptor.name == "help":
            self.help_requested = True
        else:
            self.version_requested = True
        logger.debug("[%s] '%s' requested", self.name, descriptor.name)
        return True

    def _dispatch(self, token: str) -> bool:
        """Offer the token to every field in declaration order; True if consumed."""
        for descriptor in self.schema.fields:
            if descriptor.is_nested:
                consumed = self._visit_nested(descriptor, token)
            elif descriptor.is_optional_style:
                consumed = self._visit_optional(descriptor, token)
            else:
                consumed = self._visit_positional(descriptor, token)
            if consumed:
                return True

        for descriptor in self.schema.synthetic_fields:
            if self._visit_synthetic(descriptor, token):
                return True
        return False

    def _raise_unknown_option(self, token: str) -> None:
        candidates = [
            flag
            for descriptor in self.schema.optional_fields
            for flag in descriptor.get_flags()
            if flag.startswith(token)
        ]
        if candidates:
            message = (
                f"Unrecognized option '{token}'. "
                f"Did you mean one of: {', '.join(candidates)}?"
            )
        elif self.schema.synthetic_fields:
            message = f"Unrecognized option '{token}'. Use --help to see available options."
        else:
            message = f"Unrecognized option '{token}'."
        raise UnknownOptionError(
            message, token=token, expected=self.schema.optional_field_names
        )

    def _reject(self, token: str) -> None:
        """Handle a token no field consumed."""
        if self._is_option_like(token):
            if self.config.unknown_options == "error":
                self._raise_unknown_option(token)
            logger.warning("[%s] Ignoring unrecognized option '%s'", self.name, token)
        else:
            if self.config.unexpected_positionals == "error":
                raise UnexpectedPositionalError(
                    f"Unexpected positional argument '{token}'",
                    token=token,
                )
            logger.warning(
                "[%s] Ignoring unexpected positional argument '%s'", self.name, token
            )
        self._advance()

    def _initial_values(self) -> dict[str, Any]:
        values = {}
        for descriptor in self.schema.fields:
            if descriptor.is_positional_style and not descriptor.has_default:
                continue
            values[descriptor.name] = descriptor.get_default()
        return values

    def _bind_pending_positionals(self) -> None:
        for name in self.pending_positionals:
            descriptor = self.schema.get_field(name)
            assert descriptor is not None, f"unknown positional field: {name}"
            if descriptor.has_default:
                self.values[name] = descriptor.get_default()
            elif name in self.schema.sequence_positional_names:
                assert descriptor.container is not None
                self.values[name] = descriptor.container()
            else:
                help_text = f" help: {descriptor.help}" if descriptor.help else ""
                raise MissingRequiredPositionalError(
                    f"Missing required positional argument '{name}': "
                    f"{descriptor.get_choice_text()}{help_text}",
                    field=name,
                    expected=str(descriptor.kind),
                )

    def parse(self) -> Any:
        """
        Parse the argument vector into an instance of the schema's record type.

        Returns:
            Any: The populated record.

        Raises:
            ArgumentError: On the first token that cannot be parsed, or a missing
                required positional at the end of input.
            HelpSignal: If `--help` was given at the top level.
            VersionSignal: If `--version` was given at the top level.
        """
        self.values = self._initial_values()

        while self.cursor < len(self.arguments):
            if self._consume_sentinel():
                continue
            start = self.cursor
            token = self.arguments[start]
            if not self._dispatch(token):
                self._reject(token)
            assert self.cursor > start, "every dispatch step must consume a token"

        if self.help_requested:
            raise HelpSignal()
        if self.version_requested:
            raise VersionSignal()

        self._bind_pending_positionals()
        logger.debug("[%s] Parsed values: %r", self.name, self.values)
        return self.schema.record_type(**self.values)

    def __str__(self) -> str:
        return (
            f"RecordParser({self.name}, cursor={self.cursor}, "
            f"double_dash_seen={self.double_dash_seen}, "
            f"pending={list(self.pending_positionals)})"
        )

    def __repr__(self) -> str:
        return str(self)
