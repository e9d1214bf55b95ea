# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Form model exceptions."""


class FormModelError(Exception):
    """Base exception for form model operations."""

    pass


class ConfigurationError(FormModelError):
    """Raised when a form model is declared or addressed incorrectly.

    Covers attributes declared without a type annotation and dotted paths
    through an attribute that is unknown or is not a nested form model.
    """

    pass


class AccessError(FormModelError, AttributeError):
    """Raised when reading an attribute the form model does not declare."""

    pass


class CoercionError(FormModelError, ValueError):
    """Raised when strict numeric coercion receives a non-numeric value."""

    pass
