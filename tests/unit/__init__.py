# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for formmodel components.

Each form model is exercised in isolation; no validator or web framework
is involved.
"""
