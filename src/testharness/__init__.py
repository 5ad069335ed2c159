"""
testharness - a minimal test-execution harness.

This package provides tools to:
- Describe test cases as a title, criteria text and a body
- Run them sequentially, timing each and counting logger signals
- Group cases into suites and run several suites in order
- Print a per-case and aggregate report with a single pass/fail verdict
"""

__version__ = "0.1.0"
__author__ = "testharness Team"

from testharness.core import (
    Logger,
    TestCase,
    TestCaseResult,
    TestCaseStatus,
    TestRunner,
    Testable,
    run_test,
    run_tests,
    run_tests_from_class,
    run_tests_from_classes,
)
from testharness.report import Reporter, statify

__all__ = [
    "Logger",
    "Reporter",
    "TestCase",
    "TestCaseResult",
    "TestCaseStatus",
    "TestRunner",
    "Testable",
    "run_test",
    "run_tests",
    "run_tests_from_class",
    "run_tests_from_classes",
    "statify",
]
