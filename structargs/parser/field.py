# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `FieldDescriptor` dataclass used by `RecordParser` to represent one
field of a user's record in a structured, introspectable format.

Each `FieldDescriptor` describes how one argument is read: its kind, its target
type, the descriptors of its elements for compound kinds, and the default taken
from the dataclass declaration.

Descriptors are produced by `build_schema()` from a dataclass and are immutable
for the lifetime of the schema.

Key Attributes:
- `name`: Field name, also the long option (`--name`) and subcommand token
- `kind`: `FieldKind` describing the field shape
- `type`: Target type (scalar type, Enum, Literal, container or nested dataclass)
- `elements`: Element descriptors for optional / array / sequence / pair / tuple
- `length`: Element count for fixed arrays
- `container`: Container built for arrays and sequences
- `default` / `default_factory`: Dataclass defaults
- `help`: Help text from field metadata

Used By:
- `Schema` and `build_schema()`
- `RecordParser` value parsers
- `App` help rendering
"""
from __future__ import annotations

import typing
from dataclasses import MISSING, dataclass, field
from enum import EnumMeta
from typing import Any, Literal

from structargs.parser.field_kind import FieldKind


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Represents one field of a record.

    Attributes:
        name (str): The field name.
        kind (FieldKind): How the field's value is read.
        type (Any): The target type of the value.
        elements (tuple[FieldDescriptor, ...]): Element descriptors for compound kinds.
        length (int | None): Number of elements of a fixed array.
        container (type | None): Container type built for arrays and sequences.
        default (Any): Dataclass default, or `dataclasses.MISSING`.
        default_factory (Any): Dataclass default factory, or `dataclasses.MISSING`.
        help (str): Help text for the field.
    """

    name: str
    kind: FieldKind
    type: Any = str
    elements: tuple[FieldDescriptor, ...] = ()
    length: int | None = None
    container: type | None = None
    default: Any = field(default_factory=lambda: MISSING)
    default_factory: Any = field(default_factory=lambda: MISSING)
    help: str = ""

    @property
    def is_optional_style(self) -> bool:
        return self.kind == FieldKind.OPTIONAL

    @property
    def is_nested(self) -> bool:
        return self.kind == FieldKind.NESTED_RECORD

    @property
    def is_positional_style(self) -> bool:
        return not self.is_optional_style and not self.is_nested

    @property
    def element(self) -> FieldDescriptor:
        """The single element descriptor of an optional, array or sequence field."""
        return self.elements[0]

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not MISSING

    def get_default(self) -> Any:
        """Return the declared default, calling the default factory if needed."""
        if self.default_factory is not MISSING:
            return self.default_factory()
        if self.default is not MISSING:
            return self.default
        return None

    def is_bool_flag(self) -> bool:
        """True for an optional-of-bool field whose default makes it a toggle."""
        return (
            self.is_optional_style
            and self.element.type is bool
            and isinstance(self.get_default(), bool)
        )

    def get_choices(self) -> list[str]:
        """Return the accepted tokens of an enumeration field."""
        if self.kind != FieldKind.ENUMERATION:
            return []
        if isinstance(self.type, EnumMeta):
            return [member.name for member in self.type]
        if typing.get_origin(self.type) is Literal:
            return [str(value) for value in typing.get_args(self.type)]
        return []

    def get_flags(self) -> tuple[str, ...]:
        """Get the short and long flags of an optional field."""
        if not self.is_optional_style:
            return ()
        return (f"-{self.name[0]}", f"--{self.name}")

    def get_choice_text(self, label: str | None = None) -> str:
        """Get the metavar text describing the tokens this field consumes."""
        label = label or (self.name.upper() if self.is_optional_style else self.name)
        if self.kind == FieldKind.OPTIONAL:
            if self.is_bool_flag():
                return ""
            return self.element.get_choice_text(label)
        if self.kind == FieldKind.ENUMERATION:
            return f"{{{','.join(self.get_choices())}}}"
        if self.kind == FieldKind.FIXED_ARRAY:
            assert self.length is not None, "fixed arrays always have a length"
            return " ".join([self.element.get_choice_text(label)] * self.length)
        if self.kind == FieldKind.SEQUENCE:
            return f"[{self.element.get_choice_text(label)} ...]"
        if self.kind in (FieldKind.PAIR, FieldKind.TUPLE):
            return " ".join(
                element.get_choice_text(f"{label}{index}")
                for index, element in enumerate(self.elements, start=1)
            )
        if self.kind == FieldKind.NESTED_RECORD:
            return self.name
        return label

    def get_type_name(self) -> str:
        """Get a short, readable name for the target type."""
        return getattr(self.type, "__name__", None) or str(self.type)
