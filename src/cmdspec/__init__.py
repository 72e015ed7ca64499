"""Typed command-line option declarations and dispatch."""

from .app import App
from .errors import Abort, CmdspecError, DeclarationError, OptionRejected, ParseError
from .options import (
    CommandSpec,
    OptionKind,
    OptionSpec,
    arg,
    command,
    flag,
    int32,
    int64,
    lit,
    path,
    path_arg,
    real,
    rest,
)
from .parser import (
    GenericFailure,
    InvalidArgument,
    Match,
    NotEnoughArguments,
    ParseResult,
    Success,
    UnacceptableArgument,
    UnrecognizedArgument,
    parse,
    parse_or_raise,
)
from .usage import quote, render_diagnostic, render_usage

__version__ = "0.1.0"

__all__ = [
    "Abort",
    "App",
    "CmdspecError",
    "CommandSpec",
    "DeclarationError",
    "GenericFailure",
    "InvalidArgument",
    "Match",
    "NotEnoughArguments",
    "OptionKind",
    "OptionRejected",
    "OptionSpec",
    "ParseError",
    "ParseResult",
    "Success",
    "UnacceptableArgument",
    "UnrecognizedArgument",
    "arg",
    "command",
    "flag",
    "int32",
    "int64",
    "lit",
    "parse",
    "parse_or_raise",
    "path",
    "path_arg",
    "quote",
    "real",
    "render_diagnostic",
    "render_usage",
    "rest",
]
