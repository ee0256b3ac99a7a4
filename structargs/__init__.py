"""
Structargs CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import App, parse
from .config import ParserConfig, load_config
from .exceptions import (
    ArgumentError,
    InvalidBooleanValueError,
    InvalidEnumValueError,
    InvalidScalarConversionError,
    MissingRequiredPositionalError,
    MissingValueError,
    SchemaError,
    StructArgsError,
    TooFewArrayElementsError,
    UnexpectedPositionalError,
    UnknownOptionError,
)
from .fields import field
from .parser import Array, FieldKind, Length, RecordParser, build_schema
from .signals import FlowSignal, HelpSignal, VersionSignal
from .version import __version__

logger = logging.getLogger("structargs")


__all__ = [
    "App",
    "Array",
    "ArgumentError",
    "FieldKind",
    "FlowSignal",
    "HelpSignal",
    "InvalidBooleanValueError",
    "InvalidEnumValueError",
    "InvalidScalarConversionError",
    "Length",
    "MissingRequiredPositionalError",
    "MissingValueError",
    "ParserConfig",
    "RecordParser",
    "SchemaError",
    "StructArgsError",
    "TooFewArrayElementsError",
    "UnexpectedPositionalError",
    "UnknownOptionError",
    "VersionSignal",
    "__version__",
    "build_schema",
    "field",
    "load_config",
    "parse",
]
