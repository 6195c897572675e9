"""Matching of raw command-line tokens against declared arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .constants import FLAG_PRESENT, HELP_NAME
from .errors import (
    DuplicateError,
    MissingPositionalError,
    MissingValueError,
    UnknownOptionError,
)
from .log_events import log_event
from .models import OptionalArgument, OptionalKind
from .names import format_flag_name, format_long_name, is_valid_option_token
from .parsed import ParsedArguments
from .registry import ArgumentRegistry


@dataclass(frozen=True)
class ScanResult:
    arguments: ParsedArguments
    leftovers: tuple[str, ...]


@dataclass(frozen=True)
class HelpRequested:
    """The user asked for help; the host decides whether to print and exit."""

    token: str


def scan(
    registry: ArgumentRegistry,
    tokens: Sequence[str],
    prog: str = "",
) -> ScanResult | HelpRequested:
    """Match user tokens to the registry's declarations.

    ``tokens`` excludes the program name. Option-like tokens are resolved and
    bound first as they are met; every other token is a positional candidate.
    The first candidates fill the declared positionals in order and the rest
    are returned as leftovers.

    The registry is not modified. Nothing is produced unless the whole token
    vector matches.

    Raises:
        UnknownOptionError: An option token names no declared optional.
        MissingValueError: A value-taking option is last, or followed by
            another option token.
        DuplicateError: A Flag or Single option occurs more than once.
        MissingPositionalError: Too few candidates for the declared positionals.
    """
    log_event("scan_started", prog=prog, token_count=len(tokens))

    recorded: dict[str, list[str]] = {arg.name: [] for arg in registry.optionals}
    candidates: list[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not is_valid_option_token(token):
            candidates.append(token)
            i += 1
            continue

        optional = _resolve_option(registry, token, prog)
        if optional.name == HELP_NAME:
            log_event("help_requested", prog=prog, token=token)
            return HelpRequested(token=token)

        values = recorded[optional.name]

        if optional.kind is OptionalKind.FLAG:
            if values:
                raise DuplicateError(token, prog)
            values.append(FLAG_PRESENT)
            i += 1
            continue

        if i + 1 >= len(tokens) or is_valid_option_token(tokens[i + 1]):
            raise MissingValueError(token, prog)
        if optional.kind is OptionalKind.SINGLE and values:
            raise DuplicateError(token, prog)
        values.append(tokens[i + 1])
        i += 2

    positionals = registry.positionals
    if len(candidates) < len(positionals):
        raise MissingPositionalError(positionals[len(candidates)].name, prog)

    bound = dict(zip((arg.name for arg in positionals), candidates))
    leftovers = tuple(candidates[len(positionals):])

    arguments = ParsedArguments(
        positionals={arg.name: arg for arg in positionals},
        optionals={arg.name: arg for arg in registry.optionals},
        positional_values=bound,
        optional_values={name: tuple(values) for name, values in recorded.items()},
    )
    log_event(
        "scan_finished",
        prog=prog,
        positionals=bound,
        matched_optionals=sorted(name for name, values in recorded.items() if values),
        leftovers=leftovers,
    )
    return ScanResult(arguments=arguments, leftovers=leftovers)


def _resolve_option(
    registry: ArgumentRegistry, token: str, prog: str
) -> OptionalArgument:
    """Return the declaration named by a ``-x`` or ``--name`` token."""
    flag = format_flag_name(token)
    if flag is not None:
        name = registry.resolve_flag(flag)
        if name is None:
            raise UnknownOptionError(token, prog, is_flag=True)
    else:
        name = format_long_name(token)

    optional = registry.find_optional(name) if name is not None else None
    if optional is None:
        raise UnknownOptionError(token, prog)
    return optional
