"""JSON interface declarations validated with pydantic.

A schema file describes one flat command-line interface:

    {
      "prog": "convert",
      "positionals": [{"name": "file", "help": "input file"}],
      "optionals": [
        {"flag": "-v", "name": "--verbose", "kind": "flag"},
        {"flag": "-o", "name": "--output", "help": "output file"}
      ]
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .models import OptionalKind
from .parser import ArgumentParser


class PositionalSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    help_text: str = Field(default="", alias="help")


class OptionalSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str  # long name, with its leading dashes
    flag: str | None = None
    kind: OptionalKind = OptionalKind.SINGLE
    help_text: str = Field(default="", alias="help")


class InterfaceSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prog: str | None = None
    positionals: list[PositionalSpec] = []
    optionals: list[OptionalSpec] = []


def load_schema(path: Path) -> InterfaceSchema:
    """Read and validate a schema file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid schema.
    """
    return InterfaceSchema.model_validate_json(path.read_text(encoding="utf-8"))


def build_parser(schema: InterfaceSchema, prog: str | None = None) -> ArgumentParser:
    """Declare every argument of the schema on a new parser.

    Raises:
        ConflictError: If the declarations are malformed or collide.
    """
    parser = ArgumentParser(prog=prog or schema.prog)
    for positional in schema.positionals:
        parser.add_positional(positional.name, positional.help_text)
    for optional in schema.optionals:
        names = (optional.name,) if optional.flag is None else (optional.flag, optional.name)
        parser.add_optional(*names, kind=optional.kind, help_text=optional.help_text)
    return parser
