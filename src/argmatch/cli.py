"""argmatch command: show how a declared interface matches a command line."""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .constants import APP_NAME
from .errors import ArgmatchError
from .log_events import setup_logging
from .parser import ArgumentParser
from .presenters import render_error
from .scanner import HelpRequested, ScanResult
from .schema import build_parser, load_schema


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    parser = _build_parser()

    try:
        outcome = parser.parse(args)
        if isinstance(outcome, HelpRequested):
            print(parser.format_help())
            return 0

        log_file = parser.get("log-file", default=None)
        try:
            setup_logging(log_file)
        except OSError as exc:
            print(render_error(f"Could not open log file: {exc}"), file=sys.stderr)
            return 1
        schema_path = Path(parser.get("schema"))
        # Extra positionals belong to the checked command line, ahead of --argv.
        tokens = list(outcome.leftovers)
        tokens.extend(shlex.split(parser.get("argv", default="")))

        schema = load_schema(schema_path)
        target = build_parser(schema, prog=schema.prog or schema_path.stem)
        result = target.parse(tokens)
        if isinstance(result, HelpRequested):
            print(target.format_help())
            return 0
        print(json.dumps(_result_payload(result), indent=2, ensure_ascii=False))
        return 0
    except ArgmatchError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(render_error(f"Invalid schema file: {exc}"), file=sys.stderr)
        return 1
    except OSError as exc:
        print(render_error(f"Could not read schema file: {exc}"), file=sys.stderr)
        return 1
    except ValueError as exc:
        # shlex.split() on unbalanced quotes
        print(render_error(f"Could not split --argv: {exc}"), file=sys.stderr)
        return 1


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=APP_NAME)
    parser.add_positional("schema", "JSON file declaring the interface to check")
    parser.add_optional(
        "-a",
        "--argv",
        help_text="command line to check, split like a shell would",
    )
    parser.add_optional("-l", "--log-file", help_text="write structured debug events here")
    return parser


def _result_payload(result: ScanResult) -> dict[str, Any]:
    arguments = result.arguments
    return {
        "positionals": dict(arguments.positional_values),
        "optionals": {
            name: list(values) for name, values in arguments.optional_values.items()
        },
        "leftovers": list(result.leftovers),
    }
