from __future__ import annotations

from argmatch.models import OptionalArgument, OptionalKind
from argmatch.presenters import render_error, render_help, render_option_label, render_usage
from argmatch.registry import ArgumentRegistry


def test_render_usage_lists_positionals_in_order() -> None:
    registry = ArgumentRegistry()
    registry.add_positional("source")
    registry.add_positional("dest")

    assert render_usage("cp", registry) == "Usage: cp [options] <source> <dest>"


def test_render_option_label_variants() -> None:
    assert render_option_label(
        OptionalArgument(name="output", flag="o", kind=OptionalKind.SINGLE)
    ) == "-o, --output OUTPUT"
    assert render_option_label(
        OptionalArgument(name="verbose", kind=OptionalKind.FLAG)
    ) == "--verbose"
    assert render_option_label(
        OptionalArgument(name="dry-run", kind=OptionalKind.APPEND)
    ) == "--dry-run DRY-RUN"


def test_render_help_layout() -> None:
    registry = ArgumentRegistry()
    registry.add_positional("file", "input file")
    registry.add_optional("-o", "--output", help_text="output file")

    lines = render_help("convert", registry).split("\n")

    assert lines == [
        "Usage: convert [options] <file>",
        "",
        "Positional arguments:",
        "  file              input file",
        "",
        "Options:",
        "  -h, --help                  show this help message and exit",
        "  -o, --output OUTPUT         output file",
    ]


def test_render_help_skips_empty_positional_section() -> None:
    text = render_help("tool", ArgumentRegistry())

    assert "Positional arguments:" not in text
    assert text.startswith("Usage: tool [options]\n\nOptions:\n")


def test_render_error_prefix() -> None:
    assert render_error("boom") == "ERROR: boom"
