"""Type-directed option declarations.

Instead of naming the option kind, these helpers read it off a value:
``option(settings, "count", "-n", "how many")`` looks at the current value of
``settings.count`` and, because it is an ``int``, declares an Int64 option
whose callback stores the parsed number back into ``settings.count``.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from .errors import DeclarationError
from .options import OptionSpec, arg, flag, int64, lit, path_arg, real, rest


def _with_placeholder(tag: str, placeholder: str) -> str:
    if len(tag.split()) > 1:
        return tag
    return f"{tag} {PLACEHOLDER_OPEN}{placeholder}{PLACEHOLDER_CLOSE}"


def option(settings: Any, attr: str, tag: str, *help_lines: str) -> OptionSpec:
    """Declare an option whose kind follows the type of ``settings.<attr>``.

    Booleans become flags that store the opposite of the default. Integers,
    floats, paths and strings take one value; lists take all remaining
    tokens. A bare tag such as ``"-n"`` gets a placeholder appended for
    usage output.
    """
    try:
        default = getattr(settings, attr)
    except AttributeError as exc:
        raise DeclarationError(f"{type(settings).__name__} has no attribute {attr!r}") from exc

    def assign(value: Any) -> None:
        setattr(settings, attr, value)

    # bool before int: bool is an int subclass.
    if isinstance(default, bool):
        return switch(settings, attr, tag, not default, *help_lines)
    if isinstance(default, int):
        return int64(_with_placeholder(tag, "int"), assign, *help_lines)
    if isinstance(default, float):
        return real(_with_placeholder(tag, "real"), assign, *help_lines)
    if isinstance(default, Path):
        return path_arg(_with_placeholder(tag, "path"), assign, *help_lines)
    if isinstance(default, str):
        return arg(_with_placeholder(tag, "string"), assign, *help_lines)
    if isinstance(default, list):
        return rest(tag, assign, *help_lines)
    raise DeclarationError(
        f"Cannot infer an option kind for {attr!r} from {type(default).__name__}"
    )


def switch(settings: Any, attr: str, tag: str, value: Any, *help_lines: str) -> OptionSpec:
    """Declare a flag that stores ``value`` into ``settings.<attr>``."""
    return flag(tag, lambda: setattr(settings, attr, value), *help_lines)


def _required_positional_count(effect: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(effect)
    except (TypeError, ValueError) as exc:
        raise DeclarationError(f"Cannot inspect callback {effect!r}") from exc
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in positional and param.default is inspect.Parameter.empty
    )


def action(tag: str, effect: Callable[..., Any], *help_lines: str) -> OptionSpec:
    """Declare a flag for a no-argument ``effect``, or a string option for a one-argument one."""
    count = _required_positional_count(effect)
    if count == 0:
        return flag(tag, effect, *help_lines)
    if count == 1:
        return arg(_with_placeholder(tag, "string"), effect, *help_lines)
    raise DeclarationError(f"Callback for {tag!r} must take zero or one argument, not {count}")


def otherwise(help_pattern: str, effect: Callable[[str], Any], *help_lines: str) -> OptionSpec:
    """Declare a catch-all that receives any token no earlier option claimed."""
    text = help_pattern.strip()
    key = text.split()[0] if text else ""
    # Only the first word is matched against, so it alone must be the placeholder.
    if not (key.startswith(PLACEHOLDER_OPEN) and key.endswith(PLACEHOLDER_CLOSE)):
        joined = "-".join(text.split())
        text = f"{PLACEHOLDER_OPEN}{joined}{PLACEHOLDER_CLOSE}"
    return lit(text, effect, *help_lines)


def remainder(tag: str, effect: Callable[[list[str]], Any], *help_lines: str) -> OptionSpec:
    return rest(tag, effect, *help_lines)
