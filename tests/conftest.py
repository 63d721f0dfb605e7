"""Shared fixtures for the Tabula test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from vigenere.core.engine import VigenereEngine


@pytest.fixture
def engine() -> VigenereEngine:
    return VigenereEngine(console_logging=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env={"COLUMNS": "200"})
