"""Argument declarations: positionals in order, optionals by reference name."""

from __future__ import annotations

from .constants import HELP_FLAG, HELP_NAME, HELP_TEXT
from .errors import ConflictError
from .log_events import log_event
from .models import OptionalArgument, OptionalKind, PositionalArgument
from .names import format_flag_name, format_long_name, is_valid_positional_name


class ArgumentRegistry:
    """Write-once collection of argument declarations.

    Every registry starts with a ``-h, --help`` flag. The registry treats it
    like any other optional; the scanner is what turns it into a help request.
    """

    def __init__(self) -> None:
        self._positionals: dict[str, PositionalArgument] = {}
        self._optionals: dict[str, OptionalArgument] = {}
        self._flags: dict[str, str] = {}
        self.add_optional(
            f"-{HELP_FLAG}", f"--{HELP_NAME}", kind=OptionalKind.FLAG, help_text=HELP_TEXT
        )

    def add_positional(self, name: str, help_text: str = "") -> None:
        """Declare the next positional argument.

        Raises:
            ConflictError: If the name is malformed, a duplicate, or already an
                optional reference name.
        """
        if not is_valid_positional_name(name):
            raise ConflictError(f"invalid positional argument name '{name}'")
        if name in self._positionals:
            raise ConflictError(f"duplicate positional argument name '{name}'")
        if name in self._optionals:
            raise ConflictError(
                f"positional argument name conflicts with optional argument reference name '{name}'"
            )
        self._positionals[name] = PositionalArgument(name=name, help_text=help_text)
        log_event("positional_declared", name=name)

    def add_optional(
        self,
        *names: str,
        kind: OptionalKind = OptionalKind.SINGLE,
        help_text: str = "",
    ) -> str:
        """Declare an optional argument and return its reference name.

        Accepts either a long name (``"--output"`` or ``"-output"``) or a flag
        followed by a long name (``"-o", "--output"``). The reference name is
        the long name without its leading dashes.

        Raises:
            ConflictError: If a name is malformed, or the reference name or flag
                is already taken.
        """
        if len(names) == 1:
            flag_raw, long_name = None, names[0]
        elif len(names) == 2:
            flag_raw, long_name = names
        else:
            raise TypeError("add_optional() takes a long name, optionally preceded by a flag")

        flag: str | None = None
        if flag_raw is not None:
            flag = format_flag_name(flag_raw)
            if flag is None:
                raise ConflictError(f"invalid flag name '{flag_raw}'")
            if flag in self._flags:
                raise ConflictError(f"duplicate flag name '{flag_raw}'")

        name = format_long_name(long_name)
        if name is None:
            raise ConflictError(f"invalid optional argument name: {long_name}")
        if name in self._optionals:
            raise ConflictError(f"duplicate optional argument name '{name}'")
        if name in self._positionals:
            raise ConflictError(
                f"optional argument reference name conflicts with positional argument name '{name}'"
            )

        self._optionals[name] = OptionalArgument(
            name=name, flag=flag, kind=kind, help_text=help_text
        )
        if flag is not None:
            self._flags[flag] = name
        log_event("optional_declared", name=name, flag=flag, kind=kind.value)
        return name

    @property
    def positionals(self) -> tuple[PositionalArgument, ...]:
        return tuple(self._positionals.values())

    @property
    def optionals(self) -> tuple[OptionalArgument, ...]:
        return tuple(self._optionals.values())

    def find_positional(self, name: str) -> PositionalArgument | None:
        return self._positionals.get(name)

    def find_optional(self, name: str) -> OptionalArgument | None:
        return self._optionals.get(name)

    def resolve_flag(self, flag: str) -> str | None:
        """Return the reference name bound to a flag character."""
        return self._flags.get(flag)
