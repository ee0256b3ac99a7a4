# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for structargs argument parsing.

This module converts a single token into the target Python type of a scalar or
enumeration field, including `Enum`, `Literal`, `bool`, `datetime` and unions.
All helpers raise `ValueError` on failure; the parse driver turns that into the
matching `ArgumentError` subclass.

Functions:
- coerce_bool: Convert a string to a boolean using a strict vocabulary.
- coerce_enum: Convert a string to an Enum member by name or value.
- coerce_literal: Convert a string to one of a Literal's values.
- coerce_value: General-purpose coercion to a target scalar type.
"""
import types
from datetime import date, datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_STRINGS = frozenset({"on", "yes", "1", "true"})
FALSE_STRINGS = frozenset({"off", "no", "0", "false"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts `on`, `yes`, `1`, `true` and `off`, `no`, `0`, `false`, in any case.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the value is outside the accepted spellings.
    """
    if isinstance(value, bool):
        return value
    folded = value.strip().casefold()
    if folded in TRUE_STRINGS:
        return True
    elif folded in FALSE_STRINGS:
        return False
    raise ValueError(
        f"'{value}' is not a boolean; expected one of "
        f"{{{', '.join(sorted(TRUE_STRINGS | FALSE_STRINGS))}}}"
    )


def coerce_enum(value: Any, enum_type: EnumMeta, by_value: bool = True) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Resolves by exact member name first, then, when `by_value` is set, by the
    text of a member value.

    Args:
        value (Any): The input value to convert.
        enum_type (EnumMeta): The target Enum class.
        by_value (bool): Also accept the text of a member value.

    Returns:
        Enum: The corresponding Enum instance.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    if by_value:
        for member in enum_type:
            if str(member.value) == str(value):
                return member

    names = [member.name for member in enum_type]
    raise ValueError(f"'{value}' should be one of {{{', '.join(names)}}}") from None


def coerce_literal(value: str, literal_type: Any) -> Any:
    """
    Convert a string to one of the values of a `Literal[...]` type.

    Raises:
        ValueError: If the value is not one of the literal's values.
    """
    for option in get_args(literal_type):
        if str(option) == value:
            return option
    options = ", ".join(str(option) for option in get_args(literal_type))
    raise ValueError(f"'{value}' should be one of {{{options}}}")


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles complex typing constructs such as Union, Literal, Enum, and datetime.
    Strings are returned verbatim.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if target_type is str or target_type is Any:
        return value

    if origin is Literal:
        return coerce_literal(value, target_type)

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    if target_type is date:
        try:
            return date_parser.parse(value).date()
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a date") from error

    try:
        return target_type(value)
    except TypeError as error:
        raise ValueError(
            f"Value '{value}' could not be converted to {getattr(target_type, '__name__', target_type)}"
        ) from error
