"""Strict numeric conversion for typed option values."""

from __future__ import annotations

import re

from .constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _to_bounded_int(token: str, low: int, high: int) -> int | None:
    if _INTEGER_RE.fullmatch(token) is None:
        return None
    value = int(token)
    if not low <= value <= high:
        return None
    return value


def to_int32(token: str) -> int | None:
    """Return ``token`` as a 32-bit signed integer, or None if it is not one."""
    return _to_bounded_int(token, INT32_MIN, INT32_MAX)


def to_int64(token: str) -> int | None:
    return _to_bounded_int(token, INT64_MIN, INT64_MAX)


def to_real(token: str) -> float | None:
    # float() tolerates padding and digit separators; command-line values may not.
    if token != token.strip() or "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None
