# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Structural contracts between form models and an external validator.

A validator reads values through `DataSet`, asks a `RulesProvider` for the
rules of each attribute and hands its per-attribute outcome back to a
`PostValidationHook`. FormModel satisfies all three.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ValidationResult(Protocol):
    def is_valid(self) -> bool: ...

    def get_errors(self) -> List[str]: ...


@runtime_checkable
class DataSet(Protocol):
    def get_attribute_value(self, attribute: str) -> Any: ...

    def has_attribute(self, attribute: str) -> bool: ...


@runtime_checkable
class RulesProvider(Protocol):
    def get_rules(self) -> Dict[str, Sequence[Any]]: ...


@runtime_checkable
class PostValidationHook(Protocol):
    def process_validation_result(self, result_set: Any) -> None: ...
