"""Shared fixtures for testharness tests."""

import io

import pytest
from rich.console import Console

from testharness.core.models import TestCase, TestCaseStatus


@pytest.fixture
def console() -> Console:
    """Console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def mixed_cases() -> list[TestCase]:
    """One passing, one failing and one skipped case, in that order."""
    return [
        TestCase.new("first", "passes", lambda logger: TestCaseStatus.PASSED),
        TestCase.new("second", "fails", lambda logger: TestCaseStatus.FAILED),
        TestCase.new("third", "is skipped", lambda logger: TestCaseStatus.SKIPPED),
    ]
