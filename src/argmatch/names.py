"""Lexical rules for argument names and option tokens."""

from __future__ import annotations

import re

_POSITIONAL_NAME_RE = re.compile(r"\w[a-zA-Z0-9_-]*", re.ASCII)
_OPTION_TOKEN_RE = re.compile(r"-([a-zA-Z_]|-?[a-zA-Z_][a-zA-Z0-9_-]+)")
_LONG_NAME_RE = re.compile(r"--?([a-zA-Z_][a-zA-Z0-9_-]+)")
_FLAG_NAME_RE = re.compile(r"-([a-zA-Z_])")


def is_valid_positional_name(name: str) -> bool:
    return _POSITIONAL_NAME_RE.fullmatch(name) is not None


def is_valid_option_token(token: str) -> bool:
    """Return True when the token is spelled like an option rather than a value.

    Negative numbers such as ``-5`` or ``-1.5`` are not option tokens, so they
    can be passed as values and positionals.
    """
    return _OPTION_TOKEN_RE.fullmatch(token) is not None


def format_long_name(name: str) -> str | None:
    """Strip one or two leading dashes and return the reference name."""
    match = _LONG_NAME_RE.fullmatch(name)
    if match is None:
        return None
    return match.group(1)


def format_flag_name(name: str) -> str | None:
    """Return the flag character of a ``-x`` token, or None."""
    match = _FLAG_NAME_RE.fullmatch(name)
    if match is None:
        return None
    return match.group(1)
