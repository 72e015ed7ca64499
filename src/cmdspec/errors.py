"""Custom exception types for cmdspec."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parser import ParseResult


class CmdspecError(Exception):
    """Base class for all cmdspec errors."""


class DeclarationError(ValueError, CmdspecError):
    """Raised when an option or command declaration is malformed."""


class OptionRejected(CmdspecError):
    """Raised by a callback to refuse the value it was given."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(reason)


class Abort(CmdspecError):
    """Explicit failure escape with no specific cause."""


class ParseError(CmdspecError):
    """Carries a failed parse result out of ``parse_or_raise``."""

    def __init__(self, result: ParseResult) -> None:
        self.result = result
        super().__init__(type(result).__name__)
