"""Sequential test case execution."""

import time
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from testharness.config import RunConfig
from testharness.core.logger import Logger
from testharness.core.models import TestCase, TestCaseResult, TestCaseStatus
from testharness.core.testable import SuiteError, Testable


STATUS_MARKERS = {
    TestCaseStatus.PASSED: "✅",
    TestCaseStatus.FAILED: "❌",
    TestCaseStatus.SKIPPED: "❗",
    TestCaseStatus.UNKNOWN: "⁉️",
}


def status_marker(status: TestCaseStatus) -> str:
    """Return the glyph printed next to a case's criteria."""
    try:
        return STATUS_MARKERS[status]
    except KeyError:
        raise ValueError(f"Unhandled test case status: {status!r}") from None


class TestRunner:
    """Runs test cases one after another and collects their results."""

    __test__ = False

    def __init__(
        self,
        console: Optional[Console] = None,
        config: Optional[RunConfig] = None,
    ):
        """Initialize the test runner.

        Args:
            console: Console for per-case output (stdout when omitted)
            config: Execution settings
        """
        self.console = console or Console(emoji=False, soft_wrap=True)
        self.config = config or RunConfig()

    def run_test(self, test: TestCase) -> list[TestCaseResult]:
        """Execute one test case.

        Returns a single-element list so batch execution can concatenate
        results uniformly.
        """
        self.console.print(
            f"Test: {escape(test.title)} ({escape(test.criteria)})",
            emoji=False,
            soft_wrap=True,
        )

        logger = Logger(console=self.console, verbose=self.config.verbose)
        error = None

        start = time.perf_counter_ns()
        try:
            status = test.body(logger)
        except Exception as e:
            if not self.config.catch_exceptions:
                raise
            status = TestCaseStatus.UNKNOWN
            error = f"{type(e).__name__}: {e}"
        end = time.perf_counter_ns()

        if error is None and not isinstance(status, TestCaseStatus):
            error = f"Test body returned {status!r}, expected a TestCaseStatus"
            status = TestCaseStatus.UNKNOWN

        # never negative
        duration = max(0, end - start)

        counts = logger.counts()
        self.console.print(
            f"{counts.passed} PASS  {counts.failed} FAIL  "
            f"{counts.warned} WARN  {counts.info} INFO",
            soft_wrap=True,
        )
        if error is not None:
            self.console.print(
                f"[yellow]Error:[/yellow] {escape(error)}", emoji=False, soft_wrap=True
            )
        self.console.print(
            f"{escape(test.criteria)} ... {status_marker(status)}",
            emoji=False,
            soft_wrap=True,
        )

        return [
            TestCaseResult(
                title=test.title,
                criteria=test.criteria,
                duration=duration,
                status=status,
                counts=counts,
                error=error,
            )
        ]

    def run_tests(self, tests: Iterable[TestCase]) -> list[TestCaseResult]:
        """Execute test cases in order; one result per case."""
        results: list[TestCaseResult] = []
        for test in tests:
            results.extend(self.run_test(test))
        return results

    def run_tests_from_class(self, suite: Testable) -> list[TestCaseResult]:
        """Execute every test case a suite provides."""
        if not isinstance(suite, Testable):
            raise SuiteError(f"{suite!r} does not provide a tests() method")
        return self.run_tests(suite.tests())

    def run_tests_from_classes(self, suites: Sequence[Testable]) -> list[TestCaseResult]:
        """Execute the given suites in order, concatenating their results."""
        results: list[TestCaseResult] = []
        for suite in suites:
            results.extend(self.run_tests_from_class(suite))
        return results


def run_test(test: TestCase) -> list[TestCaseResult]:
    """Execute one test case with a default runner."""
    return TestRunner().run_test(test)


def run_tests(tests: Iterable[TestCase]) -> list[TestCaseResult]:
    """Execute test cases in order with a default runner."""
    return TestRunner().run_tests(tests)


def run_tests_from_class(suite: Testable) -> list[TestCaseResult]:
    """Execute a suite's test cases with a default runner."""
    return TestRunner().run_tests_from_class(suite)


def run_tests_from_classes(suites: Sequence[Testable]) -> list[TestCaseResult]:
    """Execute several suites in order with a default runner."""
    return TestRunner().run_tests_from_classes(suites)
