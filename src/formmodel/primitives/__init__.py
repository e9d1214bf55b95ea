# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
formmodel Primitives

Building blocks shared by form models: the immutable base model, binding
settings, scalar kinds and value coercion.
"""

from .coercion import coerce, to_bool, to_float, to_int, to_str
from .enums import ScalarKind
from .model import Model
from .settings import BindingSettings
from .types import is_optional, unwrap_optional

__all__ = [
    # Core models
    "Model",
    # Settings
    "BindingSettings",
    # Coercion
    "ScalarKind",
    "coerce",
    "to_bool",
    "to_float",
    "to_int",
    "to_str",
    # Annotation helpers
    "is_optional",
    "unwrap_optional",
]
