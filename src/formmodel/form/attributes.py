# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Attribute registry for form models.

The bindable surface of a form model is its set of declared pydantic fields.
Class variables and private attributes are not fields and therefore cannot
be bound from input.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Type, get_origin

from ..primitives.types import unwrap_optional

if TYPE_CHECKING:
    from .model import FormModel


def collect_attributes(model_class: Type["FormModel"]) -> Mapping[str, Any]:
    """
    Return the declared type of every attribute, indexed by attribute name.

    Args:
        model_class: Concrete form model class

    Returns:
        Read-only mapping of attribute name to its field annotation, in
        declaration order
    """
    return MappingProxyType(
        {name: field.annotation for name, field in model_class.model_fields.items()}
    )


def is_nested_model_type(annotation: Any, base: type) -> bool:
    """True if the annotation (optionally Optional[...]) names a subclass of `base`."""
    declared = unwrap_optional(annotation)
    # list[int] passes isinstance(..., type) on some interpreters
    if not isinstance(declared, type) or get_origin(declared) is not None:
        return False
    return issubclass(declared, base)
