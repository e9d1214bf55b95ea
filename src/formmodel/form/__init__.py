# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .attributes import collect_attributes, is_nested_model_type
from .model import NESTED_SEPARATOR, FormModel, FormModelMetaclass

__all__ = [
    "FormModel",
    "FormModelMetaclass",
    "NESTED_SEPARATOR",
    "collect_attributes",
    "is_nested_model_type",
]
