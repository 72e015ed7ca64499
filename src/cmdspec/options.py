"""Option and command declarations."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .constants import OPTION_PREFIX, PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from .errors import DeclarationError


class OptionKind(StrEnum):
    FLAG = "flag"
    ARG = "arg"
    PATH_ARG = "path_arg"
    PATH = "path"
    INT32 = "int32"
    INT64 = "int64"
    REAL = "real"
    REST = "rest"
    LITERAL = "literal"


# Kinds that consume the token after the option itself as their value.
SCALAR_KINDS = frozenset({
    OptionKind.ARG,
    OptionKind.PATH_ARG,
    OptionKind.INT32,
    OptionKind.INT64,
    OptionKind.REAL,
})


class OptionSpec(BaseModel):
    """One recognized command-line option.

    ``pattern`` serves both as the match key (its first word) and as the
    text shown in usage output, e.g. ``"-n <int>"``.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(min_length=1)
    kind: OptionKind
    callback: Callable[..., Any]
    help_lines: tuple[str, ...] = ()

    @field_validator("pattern")
    @classmethod
    def _pattern_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("pattern must not be blank")
        return value

    @model_validator(mode="after")
    def _path_pattern_compiles(self) -> OptionSpec:
        if self.kind is OptionKind.PATH and not self.is_placeholder:
            try:
                re.compile(self.key)
            except re.error as exc:
                raise ValueError(f"invalid path pattern {self.key!r}: {exc}") from exc
        return self

    @property
    def key(self) -> str:
        return self.pattern.split()[0]

    @property
    def is_placeholder(self) -> bool:
        return self.key.startswith(PLACEHOLDER_OPEN) and self.key.endswith(PLACEHOLDER_CLOSE)

    def matches(self, token: str) -> bool:
        """Return True if this option claims ``token`` at the cursor."""
        if self.kind is OptionKind.LITERAL:
            return self.is_placeholder or token == self.key
        if self.kind is OptionKind.PATH:
            if self.is_placeholder:
                return bool(token) and not token.startswith(OPTION_PREFIX)
            return re.fullmatch(self.key, token) is not None
        if self.kind is OptionKind.REST:
            if self.key.startswith(OPTION_PREFIX):
                return token == self.key
            return True
        return token == self.key


class CommandSpec(BaseModel):
    """Name and ordered options of one application. Order is match priority."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    options: tuple[OptionSpec, ...] = ()

    def find_option(self, token: str) -> OptionSpec | None:
        for option in self.options:
            if option.matches(token):
                return option
        return None


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0]["msg"]


def declare(
    pattern: str,
    kind: OptionKind,
    callback: Callable[..., Any],
    help_lines: Iterable[str] = (),
) -> OptionSpec:
    """Build an ``OptionSpec``, translating validation failures."""
    try:
        return OptionSpec(
            pattern=pattern,
            kind=kind,
            callback=callback,
            help_lines=tuple(help_lines),
        )
    except ValidationError as exc:
        raise DeclarationError(f"Invalid option {pattern!r}: {_first_error(exc)}") from exc


def command(name: str, options: Sequence[OptionSpec] = ()) -> CommandSpec:
    try:
        return CommandSpec(name=name, options=tuple(options))
    except ValidationError as exc:
        raise DeclarationError(f"Invalid command {name!r}: {_first_error(exc)}") from exc


def flag(pattern: str, callback: Callable[[], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.FLAG, callback, help_lines)


def arg(pattern: str, callback: Callable[[str], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.ARG, callback, help_lines)


def path_arg(pattern: str, callback: Callable[..., Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.PATH_ARG, callback, help_lines)


def path(pattern: str, callback: Callable[..., Any], *help_lines: str) -> OptionSpec:
    """A bare path token. ``pattern`` is a regex, or a ``<placeholder>`` for any non-option token."""
    return declare(pattern, OptionKind.PATH, callback, help_lines)


def int32(pattern: str, callback: Callable[[int], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.INT32, callback, help_lines)


def int64(pattern: str, callback: Callable[[int], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.INT64, callback, help_lines)


def real(pattern: str, callback: Callable[[float], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.REAL, callback, help_lines)


def rest(pattern: str, callback: Callable[[list[str]], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.REST, callback, help_lines)


def lit(pattern: str, callback: Callable[[str], Any], *help_lines: str) -> OptionSpec:
    return declare(pattern, OptionKind.LITERAL, callback, help_lines)
