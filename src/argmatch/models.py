"""Declaration models for argmatch."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class OptionalKind(StrEnum):
    FLAG = "flag"  # presence only
    SINGLE = "single"  # at most one value
    APPEND = "append"  # any number of values, in encounter order


class PositionalArgument(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    help_text: str = ""


class OptionalArgument(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str  # reference name, long name without leading dashes
    flag: str | None = None
    kind: OptionalKind = OptionalKind.SINGLE
    help_text: str = ""

    @property
    def takes_value(self) -> bool:
        return self.kind is not OptionalKind.FLAG
