# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any

from .types import unwrap_optional


class ScalarKind(str, Enum):
    """
    Coercion kinds for values written into form attributes.

    Only the exact builtin scalar types map to a coercing kind. Everything
    else (enums, dates, containers, nested form models) is written through
    unchanged.
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    PASSTHROUGH = "passthrough"

    @classmethod
    def from_annotation(cls, annotation: Any) -> "ScalarKind":
        """Map a declared field annotation (optionally Optional[...]) to its kind."""
        declared = unwrap_optional(annotation)
        # Identity lookup: bool is a subclass of int and must not collapse into INT
        for kind_type, kind in _SCALAR_TYPES:
            if declared is kind_type:
                return kind
        return cls.PASSTHROUGH


_SCALAR_TYPES = (
    (bool, ScalarKind.BOOL),
    (int, ScalarKind.INT),
    (float, ScalarKind.FLOAT),
    (str, ScalarKind.STR),
)
