# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Validator-facing types for form models.

formmodel does not evaluate rules. This package defines the rule markers,
result containers and protocols an external validator shares with FormModel.
"""

from .contracts import DataSet, PostValidationHook, RulesProvider, ValidationResult
from .result import Result, ResultSet
from .rules import HtmlOptionsProvider, Required, Rule

__all__ = [
    # Rules
    "HtmlOptionsProvider",
    "Required",
    "Rule",
    # Results
    "Result",
    "ResultSet",
    # Contracts
    "DataSet",
    "PostValidationHook",
    "RulesProvider",
    "ValidationResult",
]
