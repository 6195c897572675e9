"""Read-only parse results and typed value extraction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .constants import FLAG_ABSENT, VALUE_ABSENT
from .errors import IndexOutOfRangeError, NoValueError, UnknownArgumentError
from .models import OptionalArgument, OptionalKind, PositionalArgument
from .registry import ArgumentRegistry
from .value_types import ValueType, resolve_value_type

NO_DEFAULT: Any = object()


@dataclass(frozen=True)
class ParsedArguments:
    """Immutable snapshot of declarations and the values matched to them.

    Produced by a successful scan; extraction only ever reads from it, so any
    number of threads may query one snapshot concurrently.
    """

    positionals: Mapping[str, PositionalArgument]
    optionals: Mapping[str, OptionalArgument]
    positional_values: Mapping[str, str | None] = field(default_factory=dict)
    optional_values: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "positionals", MappingProxyType(dict(self.positionals)))
        object.__setattr__(self, "optionals", MappingProxyType(dict(self.optionals)))
        object.__setattr__(
            self,
            "positional_values",
            MappingProxyType(
                {name: self.positional_values.get(name) for name in self.positionals}
            ),
        )
        object.__setattr__(
            self,
            "optional_values",
            MappingProxyType(
                {
                    name: tuple(self.optional_values.get(name, ()))
                    for name in self.optionals
                }
            ),
        )

    @classmethod
    def empty(cls, registry: ArgumentRegistry) -> ParsedArguments:
        """Snapshot of the current declarations with nothing matched."""
        return cls(
            positionals={arg.name: arg for arg in registry.positionals},
            optionals={arg.name: arg for arg in registry.optionals},
        )

    def get(
        self,
        name: str,
        value_type: ValueType | type = str,
        *,
        index: int = 0,
        default: Any = NO_DEFAULT,
    ) -> Any:
        """Return the value of an argument converted to ``value_type``.

        Optional arguments are resolved before positionals. When no value was
        matched, ``default`` is returned as given; without a default the call
        raises ``NoValueError``. An absent Flag-kind optional reads as
        ``"false"`` and so never falls back.

        Raises:
            UnknownArgumentError: No argument has this name.
            IndexOutOfRangeError: ``index`` is past the recorded values.
            NoValueError: Nothing was matched and no default was supplied.
            TypeConversionError: The value cannot be read as ``value_type``.
            RangeError: The value does not fit ``value_type``.
        """
        converter = resolve_value_type(value_type)
        text = self._raw_value(name, index)
        if text is None:
            if default is NO_DEFAULT:
                raise NoValueError(name)
            return default
        return converter.convert(name, text)

    def get_all(self, name: str, value_type: ValueType | type = str) -> list[Any]:
        """Return every recorded value of an optional argument, converted."""
        converter = resolve_value_type(value_type)
        return [converter.convert(name, text) for text in self._recorded(name)]

    def count(self, name: str) -> int:
        """Return how many values were recorded for an optional argument."""
        return len(self._recorded(name))

    def has_value(self, name: str) -> bool:
        return bool(self._recorded(name))

    def _recorded(self, name: str) -> tuple[str, ...]:
        if name not in self.optionals:
            raise UnknownArgumentError(name, optional_only=True)
        return self.optional_values[name]

    def _raw_value(self, name: str, index: int) -> str | None:
        optional = self.optionals.get(name)
        if optional is not None:
            values = self.optional_values[name]
            if 0 <= index < len(values):
                return values[index]
            if values:
                raise IndexOutOfRangeError(name, index)
            absent = FLAG_ABSENT if optional.kind is OptionalKind.FLAG else VALUE_ABSENT
            return absent or None

        if name not in self.positionals:
            raise UnknownArgumentError(name)
        if index != 0:
            raise IndexOutOfRangeError(name, index)
        return self.positional_values[name]
