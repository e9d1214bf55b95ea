# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sample form models shared by the form tests.

Profile covers every coercion kind plus a required and an optional nested
form; Company nests Profile to exercise multi-level dotted paths.
"""

from typing import Any, Dict, List, Optional

import pytest
from pydantic import Field

from formmodel import FormModel
from formmodel.validation import Required, Rule


class Address(FormModel):
    city: str = ""
    zip_code: str = Field(default="", title="ZIP", description="Five digits")


class HtmlRule(Rule):
    """Test rule exposing HTML input options."""

    required: bool = False

    def get_html_options(self) -> Dict[str, Any]:
        return {"required": self.required}


class Profile(FormModel):
    first_name: str = ""
    age: int = 0
    rating: float = 0.0
    subscribed: bool = False
    nickname: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    address: Address = Field(default_factory=Address)
    backup_address: Optional[Address] = None

    def get_attribute_labels(self) -> Dict[str, str]:
        return {"nickname": "Alias", "address.city": "Town"}

    def get_attribute_hints(self) -> Dict[str, str]:
        return {"first_name": "Given name, as on your passport"}

    def get_rules(self):
        return {
            "first_name": [Required()],
            "age": [HtmlRule(required=True)],
            "rating": [HtmlRule(required=False)],
            "nickname": ["not a rule"],
        }


class Company(FormModel, form_name="company_form"):
    name: str = ""
    owner: Profile = Field(default_factory=Profile)


class Point(FormModel):
    x: int = 0
    y: int = 0


@pytest.fixture
def profile() -> Profile:
    return Profile()


@pytest.fixture
def company() -> Company:
    return Company()


@pytest.fixture
def point() -> Point:
    return Point()
