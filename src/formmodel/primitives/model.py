# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Shared base for formmodel value objects.

    Binding settings, validation rules and results are declared once and never
    change afterwards. FormModel derives from it too but turns `frozen` off,
    since loading input assigns attributes in place.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Unknown keywords are rejected instead of dropped
        arbitrary_types_allowed=True,  # Form attributes may hold any Python type
    )
