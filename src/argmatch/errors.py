"""Custom exception types for argmatch."""

from __future__ import annotations


class ArgmatchError(Exception):
    """Base class for all argmatch errors."""


# ---------------------------------------------------------------------------
# Declaration errors: mistakes made by the integrating application.
# ---------------------------------------------------------------------------


class DeclarationError(ArgmatchError):
    """Raised while arguments are being declared."""


class ConflictError(ValueError, DeclarationError):
    """Malformed, duplicate, or colliding argument names and flags."""


# ---------------------------------------------------------------------------
# Scan errors: malformed or incomplete user input.
# ---------------------------------------------------------------------------


class ScanError(ArgmatchError):
    """Raised while matching user tokens. Prefixed with the program name."""

    def __init__(self, message: str, prog: str = "") -> None:
        self.message = message
        self.prog = prog
        super().__init__(f"{prog}: {message}" if prog else message)


class UnknownOptionError(ScanError):
    def __init__(self, token: str, prog: str = "", *, is_flag: bool = False) -> None:
        self.token = token
        what = "flag" if is_flag else "option"
        super().__init__(
            f"invalid {what} '{token}', pass --help to display possible options",
            prog,
        )


class MissingPositionalError(ScanError):
    def __init__(self, name: str, prog: str = "") -> None:
        self.name = name
        super().__init__(f"requires positional argument '{name}'", prog)


class MissingValueError(ScanError):
    def __init__(self, token: str, prog: str = "") -> None:
        self.token = token
        super().__init__(f"'{token}' requires a value", prog)


class DuplicateError(ScanError):
    def __init__(self, token: str, prog: str = "") -> None:
        self.token = token
        super().__init__(f"'{token}' should only be specified once", prog)


# ---------------------------------------------------------------------------
# Extraction errors: typed retrieval after a scan.
# ---------------------------------------------------------------------------


class ExtractionError(ArgmatchError):
    """Raised while reading typed values out of a parse result."""


class UnknownArgumentError(LookupError, ExtractionError):
    def __init__(self, name: str, *, optional_only: bool = False) -> None:
        self.name = name
        what = "optional argument" if optional_only else "argument"
        super().__init__(f"no {what} by the name '{name}'")


class NoValueError(LookupError, ExtractionError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no value given for '{name}' and no default specified")


class IndexOutOfRangeError(IndexError, ExtractionError):
    def __init__(self, name: str, index: int) -> None:
        self.name = name
        self.index = index
        super().__init__(f"index {index} is out of range for '{name}'")


class TypeConversionError(ValueError, ExtractionError):
    def __init__(self, name: str, requirement: str) -> None:
        self.name = name
        super().__init__(f"'{name}' must be {requirement}")


class RangeError(ValueError, ExtractionError):
    def __init__(self, name: str, lowest: object, highest: object) -> None:
        self.name = name
        self.lowest = lowest
        self.highest = highest
        super().__init__(f"'{name}' must be in range [{lowest},{highest}]")
