"""Usage and diagnostic text."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import (
    DIAG_CONTEXT_PREFIX,
    DIAG_FAILED,
    DIAG_INVALID,
    DIAG_NOT_ENOUGH,
    DIAG_UNACCEPTABLE,
    DIAG_UNACCEPTABLE_BARE,
    DIAG_UNRECOGNIZED,
    ESCAPE_CHAR,
    QUOTE_CHAR,
    USAGE_COLUMN_GAP,
    USAGE_INDENT,
    USAGE_PREFIX,
)
from .options import CommandSpec
from .parser import (
    GenericFailure,
    InvalidArgument,
    NotEnoughArguments,
    ParseResult,
    UnacceptableArgument,
    UnrecognizedArgument,
)


def quote(s: str) -> str:
    """Wrap ``s`` in double quotes, backslash-escaping backslashes and quotes.

    The result reads back as ``s`` under POSIX shell word splitting.
    """
    escaped = s.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace(QUOTE_CHAR, ESCAPE_CHAR + QUOTE_CHAR)
    return f"{QUOTE_CHAR}{escaped}{QUOTE_CHAR}"


def quote_all(tokens: Iterable[str]) -> str:
    return " ".join(quote(token) for token in tokens)


def render_usage(spec: CommandSpec) -> str:
    """Render the usage block: a synopsis line, then one row per option."""
    if not spec.options:
        return f"{USAGE_PREFIX}{spec.name}"

    synopsis = " ".join(option.pattern for option in spec.options)
    lines = [f"{USAGE_PREFIX}{spec.name} {synopsis}"]

    width = max(len(option.pattern) for option in spec.options)
    help_indent = " " * (len(USAGE_INDENT) + width + len(USAGE_COLUMN_GAP))
    for option in spec.options:
        if not option.help_lines:
            lines.append(f"{USAGE_INDENT}{option.pattern}")
            continue
        first, *more = option.help_lines
        lines.append(f"{USAGE_INDENT}{option.pattern.ljust(width)}{USAGE_COLUMN_GAP}{first}")
        lines.extend(f"{help_indent}{line}" for line in more)

    return "\n".join(lines)


def describe_failure(spec: CommandSpec, result: ParseResult) -> list[str]:
    """Return the diagnostic lines for a failed parse, without the usage block."""
    name = spec.name
    if isinstance(result, InvalidArgument):
        pattern = quote(result.option.pattern) if result.option is not None else QUOTE_CHAR * 2
        return [
            DIAG_INVALID.format(name=name, token=quote(result.token), pattern=pattern),
            _context_line(result.args),
        ]
    if isinstance(result, NotEnoughArguments):
        return [
            DIAG_NOT_ENOUGH.format(name=name, pattern=quote(result.option.pattern)),
            _context_line(result.args),
        ]
    if isinstance(result, UnrecognizedArgument):
        return [
            DIAG_UNRECOGNIZED.format(name=name, token=quote(result.token)),
            _context_line(result.args),
        ]
    if isinstance(result, UnacceptableArgument):
        template = DIAG_UNACCEPTABLE if result.reason else DIAG_UNACCEPTABLE_BARE
        return [
            template.format(
                name=name,
                token=quote_all(result.tokens),
                pattern=quote(result.option.pattern),
                reason=result.reason,
            ),
            _context_line(result.args),
        ]
    if isinstance(result, GenericFailure):
        return [DIAG_FAILED.format(name=name)]
    raise TypeError(f"Not a failed parse result: {type(result).__name__}")


def render_diagnostic(spec: CommandSpec, result: ParseResult) -> str:
    return "\n".join([*describe_failure(spec, result), render_usage(spec)])


def _context_line(args: tuple[str, ...]) -> str:
    return f"{DIAG_CONTEXT_PREFIX}{quote_all(args)}"
