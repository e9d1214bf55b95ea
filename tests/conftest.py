# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for formmodel tests.
"""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the formmodel package."""
    caplog.set_level(logging.DEBUG, logger="formmodel")
    return caplog
