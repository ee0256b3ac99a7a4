# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by structargs.

These exceptions provide structured error handling for the two places a parse can
go wrong: describing the user's record type (schema construction) and consuming
the argument vector (argument errors).

All exceptions inherit from `StructArgsError`, the base exception for the package.

Exception Hierarchy:
- StructArgsError
    ├── SchemaError
    └── ArgumentError
          ├── MissingRequiredPositionalError
          ├── MissingValueError
          │     └── TooFewArrayElementsError
          ├── InvalidEnumValueError
          ├── InvalidBooleanValueError
          ├── InvalidScalarConversionError
          ├── UnknownOptionError
          └── UnexpectedPositionalError

Help and version requests are not errors; see `structargs.signals`.
"""
from __future__ import annotations

from typing import Any


class StructArgsError(Exception):
    """Base exception for structargs."""


class SchemaError(StructArgsError):
    """Exception raised when a record type cannot be described as a schema."""


class ArgumentError(StructArgsError):
    """
    Exception raised when the argument vector cannot be parsed into the record.

    Attributes:
        message (str): Human-readable description of the failure.
        token (str | None): The offending token, if any.
        field (str | None): The field being parsed when the failure happened.
        expected (Any): What the parser expected instead (a kind, a type or choices).
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        field: str | None = None,
        expected: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.field = field
        self.expected = expected

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, token={self.token!r}, "
            f"field={self.field!r})"
        )


class MissingRequiredPositionalError(ArgumentError):
    """Exception raised when input ends with a required positional still unbound."""


class MissingValueError(ArgumentError):
    """Exception raised when a field needs a value token but none is available."""


class TooFewArrayElementsError(MissingValueError):
    """Exception raised when a fixed-size array runs out of values."""


class InvalidEnumValueError(ArgumentError):
    """Exception raised when a token names no member of the target enumeration."""


class InvalidBooleanValueError(ArgumentError):
    """Exception raised when a token is outside the accepted boolean spellings."""


class InvalidScalarConversionError(ArgumentError):
    """Exception raised when a token cannot be converted to the target type."""


class UnknownOptionError(ArgumentError):
    """Exception raised when an option-like token matches no optional field."""


class UnexpectedPositionalError(ArgumentError):
    """Exception raised when a positional token is left over after every field is bound."""
