# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rule markers exchanged with an external validator.

Rules here carry configuration only; evaluating them is the validator's job.
Form models inspect them to answer presentation questions such as whether an
input must be marked as required.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from ..primitives import Model


class Rule(Model):
    """Base class for validation rules attached to form attributes."""

    pass


class Required(Rule):
    """The attribute must not be blank."""

    message: str = "Value cannot be blank."


@runtime_checkable
class HtmlOptionsProvider(Protocol):
    """A rule that can describe itself as HTML input options (e.g. {"required": True})."""

    def get_html_options(self) -> Dict[str, Any]: ...
