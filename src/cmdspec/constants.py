"""Centralized constants for cmdspec."""

from __future__ import annotations

# Exit statuses
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Used when no name is given and argv[0] is empty
DEFAULT_COMMAND_NAME = "app"

# Pattern syntax
PLACEHOLDER_OPEN = "<"
PLACEHOLDER_CLOSE = ">"
OPTION_PREFIX = "-"

# Numeric ranges
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Quoting
QUOTE_CHAR = '"'
ESCAPE_CHAR = "\\"

# Usage rendering
USAGE_PREFIX = "Usage: "
USAGE_INDENT = "  "
USAGE_COLUMN_GAP = "  "

# Diagnostics
DIAG_INVALID = "{name}: invalid value {token} for {pattern}"
DIAG_NOT_ENOUGH = "{name}: not enough arguments for {pattern}"
DIAG_UNRECOGNIZED = "{name}: unrecognized argument {token}"
DIAG_UNACCEPTABLE = "{name}: unacceptable argument {token} for {pattern}: {reason}"
DIAG_UNACCEPTABLE_BARE = "{name}: unacceptable argument {token} for {pattern}"
DIAG_REJECTED = "{name}: {reason}"
DIAG_FAILED = "{name}: failed"
DIAG_CONTEXT_PREFIX = "  in: "

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_ENCODING = "utf-8"
