"""Declarative command-line argument matching with typed value extraction."""

from .errors import (
    ArgmatchError,
    ConflictError,
    DeclarationError,
    DuplicateError,
    ExtractionError,
    IndexOutOfRangeError,
    MissingPositionalError,
    MissingValueError,
    NoValueError,
    RangeError,
    ScanError,
    TypeConversionError,
    UnknownArgumentError,
    UnknownOptionError,
)
from .models import OptionalArgument, OptionalKind, PositionalArgument
from .parsed import ParsedArguments
from .parser import ArgumentParser
from .registry import ArgumentRegistry
from .scanner import HelpRequested, ScanResult, scan
from .value_types import (
    BOOL,
    CHAR,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    TEXT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    ValueType,
)

__all__ = [
    "BOOL",
    "CHAR",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "TEXT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "ArgmatchError",
    "ArgumentParser",
    "ArgumentRegistry",
    "ConflictError",
    "DeclarationError",
    "DuplicateError",
    "ExtractionError",
    "HelpRequested",
    "IndexOutOfRangeError",
    "MissingPositionalError",
    "MissingValueError",
    "NoValueError",
    "OptionalArgument",
    "OptionalKind",
    "ParsedArguments",
    "PositionalArgument",
    "RangeError",
    "ScanError",
    "ScanResult",
    "TypeConversionError",
    "UnknownArgumentError",
    "UnknownOptionError",
    "ValueType",
    "scan",
]
