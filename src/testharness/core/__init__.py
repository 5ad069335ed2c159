"""Core test execution functionality."""

from testharness.core.logger import Logger, LoggerCounts
from testharness.core.models import TestCase, TestCaseResult, TestCaseStatus
from testharness.core.runner import (
    TestRunner,
    run_test,
    run_tests,
    run_tests_from_class,
    run_tests_from_classes,
)
from testharness.core.testable import SuiteError, Testable

__all__ = [
    "Logger",
    "LoggerCounts",
    "TestCase",
    "TestCaseResult",
    "TestCaseStatus",
    "TestRunner",
    "Testable",
    "SuiteError",
    "run_test",
    "run_tests",
    "run_tests_from_class",
    "run_tests_from_classes",
]
