# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import Field

from ..primitives import Model
from .contracts import ValidationResult


class Result(Model):
    """Outcome of validating a single attribute: valid when it carries no errors."""

    errors: Tuple[str, ...] = Field(default_factory=tuple)

    def is_valid(self) -> bool:
        return not self.errors

    def get_errors(self) -> List[str]:
        return list(self.errors)

    def with_error(self, message: str) -> "Result":
        """Return a copy of the result with one more error appended."""
        return self.model_copy(update={"errors": self.errors + (message,)})


class ResultSet:
    """
    Per-attribute validation results, in the order the validator produced them.

    Iterating yields (attribute, result) pairs, which is the shape
    FormModel.process_validation_result() consumes.
    """

    def __init__(self, results: Optional[Mapping[str, ValidationResult]] = None):
        self._results: Dict[str, ValidationResult] = dict(results or {})

    def add_result(self, attribute: str, result: ValidationResult) -> None:
        self._results[attribute] = result

    def get_result(self, attribute: str) -> ValidationResult:
        try:
            return self._results[attribute]
        except KeyError:
            raise KeyError(f"No validation result for attribute '{attribute}'") from None

    def is_valid(self) -> bool:
        return all(result.is_valid() for result in self._results.values())

    def __iter__(self) -> Iterator[Tuple[str, ValidationResult]]:
        return iter(list(self._results.items()))

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"ResultSet({self._results!r})"
