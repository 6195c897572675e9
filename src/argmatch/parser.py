"""Single-object interface over the registry, scanner, and extractor."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Any

from .models import OptionalKind
from .parsed import NO_DEFAULT, ParsedArguments
from .presenters import render_help, render_usage
from .registry import ArgumentRegistry
from .scanner import HelpRequested, ScanResult, scan
from .value_types import ValueType


class ArgumentParser:
    """Declare arguments, parse a command line, then read typed values.

    Usage:
        1. Declare arguments with add_positional() and add_optional().
        2. Pass the command line to parse_args() (or parse() when embedding).
        3. Read each argument by name with get(), get_all(), count(), has_value().
    """

    def __init__(self, prog: str | None = None) -> None:
        self.prog = prog
        self.registry = ArgumentRegistry()
        self._parsed: ParsedArguments | None = None

    def add_positional(self, name: str, help_text: str = "") -> None:
        self.registry.add_positional(name, help_text)

    def add_optional(
        self,
        *names: str,
        kind: OptionalKind = OptionalKind.SINGLE,
        help_text: str = "",
    ) -> str:
        return self.registry.add_optional(*names, kind=kind, help_text=help_text)

    def parse(self, tokens: Sequence[str]) -> ScanResult | HelpRequested:
        """Match tokens (program name excluded) without any side effects."""
        outcome = scan(self.registry, tokens, prog=self.prog or "")
        if isinstance(outcome, ScanResult):
            self._parsed = outcome.arguments
        return outcome

    def parse_args(self, argv: Sequence[str] | None = None) -> list[str]:
        """Parse a full argument vector and return the leftover tokens.

        ``argv`` defaults to ``sys.argv``; its first entry is the program name.
        A help request prints the help text and exits with status 0. Scan
        errors propagate to the caller.
        """
        args = list(sys.argv if argv is None else argv)
        if self.prog is None:
            self.prog = os.path.basename(args[0]) if args else ""

        outcome = self.parse(args[1:])
        if isinstance(outcome, HelpRequested):
            self.print_help()
            raise SystemExit(0)
        return list(outcome.leftovers)

    @property
    def arguments(self) -> ParsedArguments:
        """The latest parse result, or an empty one before any parse."""
        if self._parsed is None:
            return ParsedArguments.empty(self.registry)
        return self._parsed

    def get(
        self,
        name: str,
        value_type: ValueType | type = str,
        *,
        index: int = 0,
        default: Any = NO_DEFAULT,
    ) -> Any:
        return self.arguments.get(name, value_type, index=index, default=default)

    def get_all(self, name: str, value_type: ValueType | type = str) -> list[Any]:
        return self.arguments.get_all(name, value_type)

    def count(self, name: str) -> int:
        return self.arguments.count(name)

    def has_value(self, name: str) -> bool:
        return self.arguments.has_value(name)

    def format_usage(self) -> str:
        return render_usage(self.prog or "", self.registry)

    def format_help(self) -> str:
        return render_help(self.prog or "", self.registry)

    def print_usage(self) -> None:
        print(self.format_usage())

    def print_help(self) -> None:
        print(self.format_help())
