"""Left-to-right option parsing and callback dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import OPTION_PREFIX
from .conversions import to_int32, to_int64, to_real
from .errors import Abort, OptionRejected, ParseError
from .options import SCALAR_KINDS, CommandSpec, OptionKind, OptionSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    option: OptionSpec
    tokens: tuple[str, ...]  # option token plus any consumed values


@dataclass(frozen=True)
class ParseResult:
    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(ParseResult):
    matches: tuple[Match, ...] = ()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidArgument(ParseResult):
    token: str
    remaining: tuple[str, ...]
    args: tuple[str, ...]
    option: OptionSpec | None = None


@dataclass(frozen=True)
class NotEnoughArguments(ParseResult):
    option: OptionSpec
    remaining: tuple[str, ...]
    args: tuple[str, ...]


@dataclass(frozen=True)
class UnrecognizedArgument(ParseResult):
    token: str
    remaining: tuple[str, ...]
    args: tuple[str, ...]


@dataclass(frozen=True)
class UnacceptableArgument(ParseResult):
    option: OptionSpec
    tokens: tuple[str, ...]
    remaining: tuple[str, ...]
    args: tuple[str, ...]
    reason: str = ""


@dataclass(frozen=True)
class GenericFailure(ParseResult):
    pass


_CONVERTERS: dict[OptionKind, Callable[[str], Any]] = {
    OptionKind.INT32: to_int32,
    OptionKind.INT64: to_int64,
    OptionKind.REAL: to_real,
}


def _expand_path(token: str) -> Path:
    return Path(token).expanduser()


def parse(spec: CommandSpec, args: Sequence[str]) -> ParseResult:
    """Consume ``args`` against ``spec``, invoking callbacks as options match.

    Stops at the first failure and returns it; callbacks already invoked are
    not undone.
    """
    all_args = tuple(args)
    matches: list[Match] = []
    i = 0

    while i < len(all_args):
        token = all_args[i]
        option = spec.find_option(token)
        if option is None:
            logger.debug("%s: no option matches %r at %d", spec.name, token, i)
            return UnrecognizedArgument(token=token, remaining=all_args[i + 1:], args=all_args)

        kind = option.kind
        if kind is OptionKind.FLAG:
            consumed = (token,)
            invoke: Callable[[], Any] = option.callback
        elif kind is OptionKind.LITERAL:
            consumed = (token,)
            invoke = _bind(option.callback, token)
        elif kind is OptionKind.PATH:
            consumed = (token,)
            invoke = _bind(option.callback, _expand_path(token))
        elif kind is OptionKind.REST:
            if option.key.startswith(OPTION_PREFIX):
                values = list(all_args[i + 1:])
            else:
                values = list(all_args[i:])
            consumed = all_args[i:]
            invoke = _bind(option.callback, values)
        elif kind in SCALAR_KINDS:
            if i + 1 >= len(all_args):
                logger.debug("%s: %r is missing its value", spec.name, option.pattern)
                return NotEnoughArguments(option=option, remaining=(), args=all_args)
            raw = all_args[i + 1]
            consumed = (token, raw)
            if kind is OptionKind.ARG:
                value: Any = raw
            elif kind is OptionKind.PATH_ARG:
                value = _expand_path(raw)
            else:
                value = _CONVERTERS[kind](raw)
                if value is None:
                    logger.debug("%s: %r is not a valid %s", spec.name, raw, kind.value)
                    return InvalidArgument(
                        token=raw,
                        remaining=all_args[i + 2:],
                        args=all_args,
                        option=option,
                    )
            invoke = _bind(option.callback, value)
        else:
            raise ValueError(f"Unhandled option kind: {kind}")

        try:
            invoke()
        except OptionRejected as exc:
            logger.debug("%s: %r rejected %r: %s", spec.name, option.pattern, consumed, exc.reason)
            return UnacceptableArgument(
                option=option,
                tokens=consumed,
                remaining=all_args[i + len(consumed):],
                args=all_args,
                reason=exc.reason,
            )
        except Abort:
            logger.debug("%s: aborted by %r", spec.name, option.pattern)
            return GenericFailure()

        logger.debug("%s: matched %r with %r", spec.name, option.pattern, consumed)
        matches.append(Match(option=option, tokens=consumed))
        i += len(consumed)

    return Success(matches=tuple(matches))


def parse_or_raise(spec: CommandSpec, args: Sequence[str]) -> Success:
    result = parse(spec, args)
    if not isinstance(result, Success):
        raise ParseError(result)
    return result


def _bind(callback: Callable[..., Any], value: Any) -> Callable[[], Any]:
    return lambda: callback(value)
