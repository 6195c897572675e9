"""Conversion of matched string values into typed results.

The set of value types is closed: one object per supported output type. Python
builtins are accepted as shorthand and map onto the 64-bit members.
"""

from __future__ import annotations

import re
import struct
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import RangeError, TypeConversionError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ValueType:
    """Base class for the supported output types."""

    name = "value"

    def convert(self, arg_name: str, text: str) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<ValueType {self.name}>"


class BoolType(ValueType):
    name = "bool"

    def convert(self, arg_name: str, text: str) -> bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise TypeConversionError(arg_name, "either 'true' or 'false'")


class CharType(ValueType):
    name = "char"

    def convert(self, arg_name: str, text: str) -> str:
        if len(text) != 1:
            raise TypeConversionError(arg_name, "a single character")
        return text


class TextType(ValueType):
    name = "str"

    def convert(self, arg_name: str, text: str) -> str:
        return text


@dataclass(frozen=True, repr=False)
class IntType(ValueType):
    bits: int
    signed: bool

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def lowest(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def highest(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def convert(self, arg_name: str, text: str) -> int:
        stripped = text.strip()
        # Reject before parsing so a negative never wraps to a large unsigned value.
        if not self.signed and stripped.startswith("-"):
            raise RangeError(arg_name, self.lowest, self.highest)
        if _INTEGER_RE.fullmatch(stripped) is None:
            raise TypeConversionError(arg_name, "of integral type")
        # int() refuses very long digit strings, so those are out of range here.
        negative = stripped.startswith("-")
        digits = stripped.lstrip("+-").lstrip("0") or "0"
        if len(digits) > len(str(-self.lowest if negative else self.highest)):
            raise RangeError(arg_name, self.lowest, self.highest)
        value = -int(digits) if negative else int(digits)
        if value < self.lowest or value > self.highest:
            raise RangeError(arg_name, self.lowest, self.highest)
        return value


@dataclass(frozen=True, repr=False)
class FloatType(ValueType):
    bits: int
    max_value: float

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"float{self.bits}"

    def convert(self, arg_name: str, text: str) -> float:
        stripped = text.strip()
        if _FLOAT_RE.fullmatch(stripped) is None:
            raise TypeConversionError(arg_name, "of floating point type")
        try:
            exact = Decimal(stripped)
        except InvalidOperation:
            # Exponent beyond what Decimal can hold.
            return self._convert_extreme(arg_name, stripped)

        if exact.is_nan():
            return float("nan")
        limit = Decimal(self.max_value)
        if exact < -limit or exact > limit:
            raise RangeError(arg_name, -self.max_value, self.max_value)

        value = float(exact)
        if self.bits == 32:
            value = struct.unpack("f", struct.pack("f", value))[0]
        return value

    def _convert_extreme(self, arg_name: str, text: str) -> float:
        mantissa, _, exponent = text.lower().partition("e")
        negative = mantissa.startswith("-")
        if Decimal(mantissa) == 0 or exponent.startswith("-"):
            return -0.0 if negative else 0.0
        raise RangeError(arg_name, -self.max_value, self.max_value)


BOOL = BoolType()
CHAR = CharType()
TEXT = TextType()
INT8 = IntType(8, signed=True)
INT16 = IntType(16, signed=True)
INT32 = IntType(32, signed=True)
INT64 = IntType(64, signed=True)
UINT8 = IntType(8, signed=False)
UINT16 = IntType(16, signed=False)
UINT32 = IntType(32, signed=False)
UINT64 = IntType(64, signed=False)
FLOAT32 = FloatType(32, max_value=3.4028234663852886e38)
FLOAT64 = FloatType(64, max_value=sys.float_info.max)

_BUILTIN_TYPES: dict[type, ValueType] = {
    bool: BOOL,
    str: TEXT,
    int: INT64,
    float: FLOAT64,
}


def resolve_value_type(value_type: ValueType | type) -> ValueType:
    """Map a value type or a builtin type onto the closed set."""
    if isinstance(value_type, ValueType):
        return value_type
    try:
        return _BUILTIN_TYPES[value_type]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported value type: {value_type!r}") from None
