# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import logging

"""
formmodel - Typed HTML form models for Python

Binds raw submitted data to typed form attributes, keeps per-attribute
validation errors and derives labels and hints for presentation.

Key Entry Points:
- formmodel.FormModel - Base class for concrete forms
- formmodel.validation - Contracts shared with an external validator
- formmodel.BindingSettings - Per-form coercion configuration

Example Usage:
    ```python
    from formmodel import FormModel
    from formmodel.validation import Required

    class Login(FormModel):
        login: str = ""
        password: str = ""
        remember_me: bool = False

        def get_rules(self):
            return {"login": [Required()], "password": [Required()]}

    form = Login()
    if form.load(request.form):
        print(form.get_attribute_label("remember_me"))  # Remember Me
    ```
"""

# Libraries must not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .exceptions import AccessError, CoercionError, ConfigurationError, FormModelError
from .form import FormModel
from .primitives import BindingSettings, ScalarKind

__all__ = [
    "AccessError",
    "BindingSettings",
    "CoercionError",
    "ConfigurationError",
    "FormModel",
    "FormModelError",
    "ScalarKind",
]
