"""User-facing text rendering: usage, help, and errors."""

from __future__ import annotations

from .constants import (
    ERROR_PREFIX,
    HELP_INDENT,
    OPTION_COLUMN_WIDTH,
    POSITIONAL_COLUMN_WIDTH,
)
from .models import OptionalArgument
from .registry import ArgumentRegistry


def render_usage(prog: str, registry: ArgumentRegistry) -> str:
    parts = [f"Usage: {prog}"]
    if registry.optionals:
        parts.append("[options]")
    parts.extend(f"<{arg.name}>" for arg in registry.positionals)
    return " ".join(parts)


def render_option_label(optional: OptionalArgument) -> str:
    """Return e.g. ``-o, --output OUTPUT`` or ``--verbose``."""
    label = f"-{optional.flag}, " if optional.flag is not None else ""
    label += f"--{optional.name}"
    if optional.takes_value:
        label += f" {optional.name.upper()}"
    return label


def render_help(prog: str, registry: ArgumentRegistry) -> str:
    lines = [render_usage(prog, registry)]

    if registry.positionals:
        lines.append("")
        lines.append("Positional arguments:")
        for positional in registry.positionals:
            lines.append(
                f"{HELP_INDENT}{positional.name:<{POSITIONAL_COLUMN_WIDTH}}{positional.help_text}"
            )

    if registry.optionals:
        lines.append("")
        lines.append("Options:")
        for optional in registry.optionals:
            label = f"{HELP_INDENT}{render_option_label(optional)}"
            lines.append(f"{label:<{OPTION_COLUMN_WIDTH}}{optional.help_text}")

    return "\n".join(lines)


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"
