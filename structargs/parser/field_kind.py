# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FieldKind`, the enum that classifies every field of a record by how its
value is read from the argument vector.

The parse driver dispatches on this enum: each member has its own value parser
with its own token arity.

Supports alias coercion for shorthand values, and provides a consistent
interface for schema construction and help rendering.

Exports:
    - FieldKind: Enum of field shapes.

Example:
    FieldKind("array")   → FieldKind.FIXED_ARRAY
    FieldKind("list")    → FieldKind.SEQUENCE
    FieldKind("enum")    → FieldKind.ENUMERATION
"""
from __future__ import annotations

from enum import Enum


class FieldKind(Enum):
    """
    Defines the shape of a record field.

    Members:
        SCALAR: One token converted to the target type.
        ENUMERATION: One token naming an enum member or literal value.
        OPTIONAL: A flag-triggered field (`--name` / `-n`) wrapping an element kind.
        FIXED_ARRAY: Exactly N element values.
        SEQUENCE: Element values read greedily until the next option or `--`.
        PAIR: Two element values of possibly different types.
        TUPLE: K element values of possibly different types.
        NESTED_RECORD: A subcommand; a nested record parsed from the remaining tokens.

    Aliases:
        - "enum" → "enumeration"
        - "array" → "fixed_array"
        - "list" → "sequence"
        - "subcommand" → "nested_record"
    """

    SCALAR = "scalar"
    ENUMERATION = "enumeration"
    OPTIONAL = "optional"
    FIXED_ARRAY = "fixed_array"
    SEQUENCE = "sequence"
    PAIR = "pair"
    TUPLE = "tuple"
    NESTED_RECORD = "nested_record"

    @classmethod
    def choices(cls) -> list[FieldKind]:
        """Return a list of all field kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "enum": "enumeration",
            "array": "fixed_array",
            "list": "sequence",
            "subcommand": "nested_record",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FieldKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_multi_value(self) -> bool:
        """True for kinds whose value is a container of element values."""
        return self in (FieldKind.FIXED_ARRAY, FieldKind.SEQUENCE)

    def __str__(self) -> str:
        """Return the string representation of the field kind."""
        return self.value
