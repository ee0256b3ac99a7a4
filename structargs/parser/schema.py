# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides utilities for introspecting a dataclass and deriving the `Schema` the
parse driver walks.

The record's field declarations are the single source of truth: field order gives
positional order, `T | None` annotations make optional-style fields, and the
rest of each annotation decides how many tokens a value consumes.

Functions:
- describe_type: Build a `FieldDescriptor` for one annotation.
- build_schema: Derive (and cache) the `Schema` of a dataclass.
"""
from __future__ import annotations

import collections
import collections.abc
import dataclasses
import functools
import types
import typing
from dataclasses import dataclass
from enum import EnumMeta
from typing import Annotated, Any, Literal, Union

from structargs.config import DEFAULT_CONFIG, ParserConfig
from structargs.exceptions import SchemaError
from structargs.logger import logger
from structargs.parser.field import FieldDescriptor
from structargs.parser.field_kind import FieldKind
from structargs.parser.parser_types import Length

_SEQUENCE_CONTAINERS: dict[Any, type] = {
    list: list,
    collections.deque: collections.deque,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
}


@dataclass(frozen=True)
class Schema:
    """
    The immutable description of a record's fields.

    Attributes:
        record_type (type): The dataclass being parsed.
        fields (tuple[FieldDescriptor, ...]): User fields in declaration order.
        synthetic_fields (tuple[FieldDescriptor, ...]): `help` / `version` at the top level.
        top_level (bool): Whether this schema parses a whole argument vector.
    """

    record_type: type
    fields: tuple[FieldDescriptor, ...]
    synthetic_fields: tuple[FieldDescriptor, ...] = ()
    top_level: bool = True

    @property
    def field_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.fields]

    @property
    def optional_fields(self) -> list[FieldDescriptor]:
        """Optional-style user fields followed by the synthetic fields."""
        return [
            descriptor for descriptor in self.fields if descriptor.is_optional_style
        ] + list(self.synthetic_fields)

    @property
    def optional_field_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.optional_fields]

    @property
    def positional_fields(self) -> list[FieldDescriptor]:
        return [
            descriptor for descriptor in self.fields if descriptor.is_positional_style
        ]

    @property
    def positional_field_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.positional_fields]

    @property
    def sequence_positional_names(self) -> list[str]:
        return [
            descriptor.name
            for descriptor in self.positional_fields
            if descriptor.kind.is_multi_value
        ]

    @property
    def nested_fields(self) -> list[FieldDescriptor]:
        return [descriptor for descriptor in self.fields if descriptor.is_nested]

    @property
    def nested_field_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.nested_fields]

    def get_field(self, name: str) -> FieldDescriptor | None:
        """Return the user or synthetic field called `name`, if any."""
        return next(
            (
                descriptor
                for descriptor in (*self.fields, *self.synthetic_fields)
                if descriptor.name == name
            ),
            None,
        )

    def is_field_name(self, name: str) -> bool:
        return name in self.field_names

    def __str__(self) -> str:
        return (
            f"Schema({self.record_type.__name__}, "
            f"optional={self.optional_field_names}, "
            f"positional={self.positional_field_names}, "
            f"nested={self.nested_field_names})"
        )


def _is_record_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def _split_optional(annotation: Any) -> tuple[bool, Any]:
    """Return (is_optional, inner) for `T | None` / `Optional[T]` annotations."""
    origin = typing.get_origin(annotation)
    if not (isinstance(annotation, types.UnionType) or origin is Union):
        return False, annotation
    args = typing.get_args(annotation)
    if type(None) not in args:
        return False, annotation
    others = tuple(arg for arg in args if arg is not type(None))
    if len(others) == 1:
        return True, others[0]
    return True, Union[others]


def _describe_fixed_array(name: str, base: Any, size: int) -> FieldDescriptor:
    origin = typing.get_origin(base) or base
    args = typing.get_args(base)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            element_type = args[0]
        elif not args:
            element_type = str
        else:
            raise SchemaError(
                f"Field '{name}': Length() needs a homogeneous tuple such as tuple[float, ...]"
            )
        container: type = tuple
    elif origin in _SEQUENCE_CONTAINERS:
        element_type = args[0] if args else str
        container = _SEQUENCE_CONTAINERS[origin]
    else:
        raise SchemaError(
            f"Field '{name}': Length() can only annotate a list, deque or tuple, got {base!r}"
        )
    return FieldDescriptor(
        name=name,
        kind=FieldKind.FIXED_ARRAY,
        type=container,
        elements=(describe_type(name, element_type),),
        length=size,
        container=container,
    )


def describe_type(
    name: str, annotation: Any, allow_optional: bool = False
) -> FieldDescriptor:
    """
    Build a `FieldDescriptor` for an annotation.

    Args:
        name (str): Field name used in descriptors and error messages.
        annotation (Any): A resolved type annotation.
        allow_optional (bool): Whether `T | None` and nested records are allowed,
            i.e. whether this is a direct field of a record.

    Returns:
        FieldDescriptor: The descriptor, without default or help text.

    Raises:
        SchemaError: If the annotation is not supported.
    """
    origin = typing.get_origin(annotation)

    if origin is Annotated:
        base, *metadata = typing.get_args(annotation)
        lengths = [item for item in metadata if isinstance(item, Length)]
        if lengths:
            return _describe_fixed_array(name, base, lengths[-1].size)
        return describe_type(name, base, allow_optional)

    is_optional, inner = _split_optional(annotation)
    if is_optional:
        if not allow_optional:
            raise SchemaError(
                f"Field '{name}': optional types are only supported for record fields"
            )
        if _is_record_type(inner):
            return FieldDescriptor(name=name, kind=FieldKind.NESTED_RECORD, type=inner)
        element = describe_type(name, inner)
        return FieldDescriptor(
            name=name, kind=FieldKind.OPTIONAL, type=annotation, elements=(element,)
        )

    if _is_record_type(annotation):
        if not allow_optional:
            raise SchemaError(
                f"Field '{name}': nested records are only supported as record fields"
            )
        return FieldDescriptor(name=name, kind=FieldKind.NESTED_RECORD, type=annotation)

    if isinstance(annotation, EnumMeta) or origin is Literal:
        if isinstance(annotation, EnumMeta) and not list(annotation):
            raise SchemaError(f"Field '{name}': enumeration {annotation!r} has no members")
        return FieldDescriptor(name=name, kind=FieldKind.ENUMERATION, type=annotation)

    if annotation is tuple or origin is tuple:
        args = typing.get_args(annotation)
        if not args:
            return FieldDescriptor(
                name=name,
                kind=FieldKind.SEQUENCE,
                type=tuple,
                elements=(describe_type(name, str),),
                container=tuple,
            )
        if len(args) == 2 and args[1] is Ellipsis:
            return FieldDescriptor(
                name=name,
                kind=FieldKind.SEQUENCE,
                type=annotation,
                elements=(describe_type(name, args[0]),),
                container=tuple,
            )
        if args == ((),):
            raise SchemaError(f"Field '{name}': empty tuples cannot be parsed")
        return FieldDescriptor(
            name=name,
            kind=FieldKind.PAIR if len(args) == 2 else FieldKind.TUPLE,
            type=annotation,
            elements=tuple(describe_type(name, arg) for arg in args),
            container=tuple,
        )

    sequence_origin = origin if origin is not None else annotation
    if sequence_origin in _SEQUENCE_CONTAINERS:
        args = typing.get_args(annotation)
        return FieldDescriptor(
            name=name,
            kind=FieldKind.SEQUENCE,
            type=annotation,
            elements=(describe_type(name, args[0] if args else str),),
            container=_SEQUENCE_CONTAINERS[sequence_origin],
        )

    if isinstance(annotation, types.UnionType) or origin is Union:
        for member in typing.get_args(annotation):
            if describe_type(name, member).kind not in (
                FieldKind.SCALAR,
                FieldKind.ENUMERATION,
            ):
                raise SchemaError(
                    f"Field '{name}': unions may only combine scalar types, got {annotation!r}"
                )
        return FieldDescriptor(name=name, kind=FieldKind.SCALAR, type=annotation)

    if origin is not None:
        raise SchemaError(f"Field '{name}': unsupported annotation {annotation!r}")

    if annotation is Any:
        return FieldDescriptor(name=name, kind=FieldKind.SCALAR, type=str)

    if not callable(annotation):
        raise SchemaError(f"Field '{name}': unsupported annotation {annotation!r}")

    return FieldDescriptor(name=name, kind=FieldKind.SCALAR, type=annotation)


def _synthetic_fields(
    names: set[str], config: ParserConfig
) -> tuple[FieldDescriptor, ...]:
    synthetic = []
    flag = FieldDescriptor(name="", kind=FieldKind.SCALAR, type=bool)
    if config.add_help and "help" not in names:
        synthetic.append(
            FieldDescriptor(
                name="help",
                kind=FieldKind.OPTIONAL,
                type=bool | None,
                elements=(dataclasses.replace(flag, name="help"),),
                default=False,
                help="Show this help message and exit.",
            )
        )
    if config.add_version and "version" not in names:
        synthetic.append(
            FieldDescriptor(
                name="version",
                kind=FieldKind.OPTIONAL,
                type=bool | None,
                elements=(dataclasses.replace(flag, name="version"),),
                default=False,
                help="Show program version and exit.",
            )
        )
    return tuple(synthetic)


def _check_short_collisions(record_type: type, fields: list[FieldDescriptor]) -> None:
    seen: dict[str, str] = {}
    for descriptor in fields:
        if not descriptor.is_optional_style:
            continue
        letter = descriptor.name[0]
        if letter in seen:
            raise SchemaError(
                f"{record_type.__name__}: options '--{seen[letter]}' and "
                f"'--{descriptor.name}' share the short form '-{letter}'"
            )
        seen[letter] = descriptor.name


@functools.cache
def _build_schema(record_type: type, top_level: bool, config: ParserConfig) -> Schema:
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except NameError as error:
        raise SchemaError(
            f"Could not resolve annotations of {record_type.__name__}: {error}"
        ) from error

    descriptors = []
    for record_field in dataclasses.fields(record_type):
        if not record_field.init:
            continue
        annotation = hints.get(record_field.name, str)
        descriptor = describe_type(record_field.name, annotation, allow_optional=True)
        descriptors.append(
            dataclasses.replace(
                descriptor,
                default=record_field.default,
                default_factory=record_field.default_factory,
                help=record_field.metadata.get("help", ""),
            )
        )

    if config.short_option_collisions == "error":
        _check_short_collisions(record_type, descriptors)

    synthetic: tuple[FieldDescriptor, ...] = ()
    if top_level:
        synthetic = _synthetic_fields({d.name for d in descriptors}, config)

    schema = Schema(
        record_type=record_type,
        fields=tuple(descriptors),
        synthetic_fields=synthetic,
        top_level=top_level,
    )
    logger.debug("Built %s", schema)
    return schema


def build_schema(
    record_type: type,
    top_level: bool = True,
    config: ParserConfig | None = None,
) -> Schema:
    """
    Derive the `Schema` of a dataclass.

    Schemas are cached per (record type, top_level, config).

    Args:
        record_type (type): A dataclass type.
        top_level (bool): Add the synthetic `help` / `version` fields.
        config (ParserConfig | None): Parser settings; defaults are used when omitted.

    Returns:
        Schema: The record's schema.

    Raises:
        SchemaError: If `record_type` is not a dataclass or a field is unsupported.
    """
    if not _is_record_type(record_type):
        raise SchemaError(f"{record_type!r} is not a dataclass type")
    return _build_schema(record_type, top_level, config or DEFAULT_CONFIG)
