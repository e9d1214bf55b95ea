# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Coercion of raw input values into declared scalar attribute types.

Submitted form data arrives as strings (or whatever a decoder produced), while
form attributes are typed. Values are cast by the attribute's `ScalarKind`:

- BOOL: truthiness, with configurable falsy strings ("" and "0" by default)
- INT / FLOAT: numeric cast, lenient or strict (see BindingSettings)
- STR: str(), with None becoming "" and bytes decoded as UTF-8
- PASSTHROUGH: unchanged

The lenient numeric cast mirrors loose scripting-language casts: a leading
numeric prefix is honoured ("12px" -> 12) and anything else becomes zero.
The cast is lossy, so every fallback is logged at DEBUG.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional, Union

from ..exceptions import CoercionError
from .enums import ScalarKind
from .settings import BindingSettings

logger = logging.getLogger(__name__)

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_DEFAULT_SETTINGS = BindingSettings()


def coerce(
    kind: ScalarKind, value: Any, settings: Optional[BindingSettings] = None
) -> Any:
    """
    Cast a raw value for an attribute of the given kind.

    Args:
        kind: Coercion kind of the target attribute
        value: Raw input value
        settings: Binding policy; defaults to BindingSettings()

    Returns:
        The coerced value

    Raises:
        CoercionError: If strict numeric coercion is enabled and the value
            is not numeric
    """
    settings = settings or _DEFAULT_SETTINGS

    if kind is ScalarKind.BOOL:
        return to_bool(value, settings.falsy_strings)
    if kind is ScalarKind.INT:
        return to_int(value, strict=settings.strict_numeric_coercion)
    if kind is ScalarKind.FLOAT:
        return to_float(value, strict=settings.strict_numeric_coercion)
    if kind is ScalarKind.STR:
        return to_str(value)
    if kind is ScalarKind.PASSTHROUGH:
        return value
    raise ValueError(f"Unsupported scalar kind: {kind!r}")


def to_bool(value: Any, falsy_strings=frozenset({"", "0"})) -> bool:
    if isinstance(value, str):
        return value not in falsy_strings
    return bool(value)


def to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return str(value)


def to_int(value: Any, strict: bool = False) -> int:
    number = _to_number(value, strict)
    if isinstance(number, float):
        if not math.isfinite(number):
            return _fallback(value, 0, strict, "int")
        return int(number)
    return number


def to_float(value: Any, strict: bool = False) -> float:
    return float(_to_number(value, strict, as_float=True))


def _to_number(value: Any, strict: bool, as_float: bool = False) -> Union[int, float]:
    target = "float" if as_float else "int"
    zero = 0.0 if as_float else 0

    if value is None:
        return _fallback(value, zero, strict, target)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, bytes):
        try:
            value = value.decode()
        except UnicodeDecodeError:
            return _fallback(value, zero, strict, target)
    if isinstance(value, str):
        return _parse_numeric_text(value, strict, zero, target)

    try:
        return float(value) if as_float else int(value)
    except (TypeError, ValueError, OverflowError):
        return _fallback(value, zero, strict, target)


def _parse_numeric_text(
    text: str, strict: bool, zero: Union[int, float], target: str
) -> Union[int, float]:
    if strict:
        match = _NUMERIC_PREFIX.fullmatch(text.strip())
    else:
        match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return _fallback(text, zero, strict, target)

    literal = match.group().strip()
    if literal != text.strip():
        logger.debug(f"Truncated numeric input {text!r} to {literal!r}")
    if any(marker in literal for marker in ".eE"):
        return float(literal)
    return int(literal)


def _fallback(value: Any, zero: Union[int, float], strict: bool, target: str):
    if strict:
        raise CoercionError(f"Cannot coerce {value!r} to {target}")
    logger.debug(f"Non-numeric input {value!r} coerced to {zero!r} for {target} attribute")
    return zero
