# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import types
from typing import Any, Union, get_args, get_origin

_UNION_ORIGINS = (Union, types.UnionType)


def is_optional(annotation: Any) -> bool:
    """True for `Optional[X]`, `Union[X, None]` and `X | None` annotations."""
    return get_origin(annotation) in _UNION_ORIGINS and type(None) in get_args(annotation)


def unwrap_optional(annotation: Any) -> Any:
    """
    Strip `None` from an optional annotation.

    `Optional[int]` becomes `int`. Unions with more than one non-None member
    are returned unchanged since they do not name a single declared type.
    """
    if get_origin(annotation) not in _UNION_ORIGINS:
        return annotation
    members = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(members) == 1:
        return members[0]
    return annotation
