# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .inflector import humanize, to_words, uppercase_first_character_in_each_word

__all__ = [
    "humanize",
    "to_words",
    "uppercase_first_character_in_each_word",
]
