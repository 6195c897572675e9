"""Literal constants used by argmatch."""

APP_NAME = "argmatch"

HELP_NAME = "help"
HELP_FLAG = "h"
HELP_TEXT = "show this help message and exit"

# Recorded value for a Flag-kind optional that was present.
FLAG_PRESENT = "true"
# Stand-in values when an optional was never matched.
FLAG_ABSENT = "false"
VALUE_ABSENT = ""

POSITIONAL_COLUMN_WIDTH = 18
OPTION_COLUMN_WIDTH = 30
HELP_INDENT = "  "

ERROR_PREFIX = "ERROR:"
