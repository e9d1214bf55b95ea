# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Identifier to human-readable words conversion used for attribute labels."""

from __future__ import annotations

import re

import humps

_SEPARATORS = re.compile(r"[\s_\-.]+")


def to_words(text: str) -> str:
    """
    Split an identifier into lowercase words.

    Case changes are turned into underscores by humps, keeping a run of
    capitals together as one word (an acronym). Underscores, dashes, dots
    and whitespace then separate the words.

    Example:
        >>> to_words("department_name")
        'department name'
        >>> to_words("HTMLParser")
        'html parser'
    """
    # decamelize returns all-caps input untouched
    snake = humps.decamelize(text).lower()
    return " ".join(word for word in _SEPARATORS.split(snake) if word)


def uppercase_first_character_in_each_word(text: str) -> str:
    # str.title() would also lowercase the tail and capitalize after digits
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def humanize(name: str) -> str:
    """'first_name' or 'FirstName' -> 'First Name'"""
    return uppercase_first_character_in_each_word(to_words(name))
