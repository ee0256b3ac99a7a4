"""
Structargs CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .field import FieldDescriptor
from .field_kind import FieldKind
from .parser_types import Array, Length
from .record_parser import RecordParser
from .schema import Schema, build_schema, describe_type

__all__ = [
    "Array",
    "FieldDescriptor",
    "FieldKind",
    "Length",
    "RecordParser",
    "Schema",
    "build_schema",
    "describe_type",
]
