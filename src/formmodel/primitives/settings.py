# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import FrozenSet

from pydantic import Field

from .model import Model


class BindingSettings(Model):
    """
    Configuration for how raw input is coerced into form attributes.

    A form class carries its settings as the `binding_settings` class variable;
    subclasses override it to change the policy for that form only.

    Usage Examples:
        # Default, lenient casting (non-numeric strings become zero)
        settings = BindingSettings()

        # Reject non-numeric input for numeric attributes
        class PaymentForm(FormModel):
            binding_settings: ClassVar[BindingSettings] = BindingSettings(
                strict_numeric_coercion=True
            )
    """

    strict_numeric_coercion: bool = Field(
        default=False,
        description=(
            "If True, raise CoercionError for non-numeric input to int/float "
            "attributes; otherwise fall back to zero and log the fallback."
        ),
    )
    falsy_strings: FrozenSet[str] = Field(
        default=frozenset({"", "0"}),
        description="String inputs treated as False by bool attributes.",
    )
