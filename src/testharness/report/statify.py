"""Aggregate reporting over a run's results."""

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from testharness.core.models import TestCaseResult, TestCaseStatus


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts over a sequence of results."""

    total: int = 0
    duration: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    unknown: int = 0

    @property
    def failed_any(self) -> bool:
        """The run verdict: True when anything failed or ended unknown."""
        return (self.failed + self.unknown) > 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "duration": self.duration,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "unknown": self.unknown,
        }


MESSAGE_FORMATS = {
    TestCaseStatus.PASSED: "{criteria}",
    TestCaseStatus.FAILED: "{criteria}",
    TestCaseStatus.SKIPPED: "{criteria}",
    TestCaseStatus.UNKNOWN: "{criteria}",
}


def format_message(result: TestCaseResult) -> str:
    """Report text for one result. Identical for every status."""
    try:
        template = MESSAGE_FORMATS[result.status]
    except KeyError:
        raise ValueError(f"Unhandled test case status: {result.status!r}") from None
    return template.format(criteria=result.criteria)


class Reporter:
    """Prints per-result lines and the aggregate summary of a run."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(emoji=False, soft_wrap=True)

    def summarize(self, results: Sequence[TestCaseResult]) -> RunSummary:
        """Fold results into aggregate counts without printing."""
        total = duration = 0
        passed = failed = skipped = unknown = 0

        for result in results:
            if result.status == TestCaseStatus.PASSED:
                passed += 1
            elif result.status == TestCaseStatus.FAILED:
                failed += 1
            elif result.status == TestCaseStatus.SKIPPED:
                skipped += 1
            elif result.status == TestCaseStatus.UNKNOWN:
                unknown += 1
            else:
                raise ValueError(f"Unhandled test case status: {result.status!r}")
            total += 1
            duration += result.duration

        return RunSummary(
            total=total,
            duration=duration,
            passed=passed,
            failed=failed,
            skipped=skipped,
            unknown=unknown,
        )

    def statify(self, results: Sequence[TestCaseResult]) -> bool:
        """Print the report for a run and return True if anything failed.

        Skipped cases never count as failures.
        """
        self.console.print("\n---\n")

        for result in results:
            self.console.print(
                f"{escape(result.title)} ({result.duration} Nanosecond(s)): "
                f"{escape(format_message(result))}",
                emoji=False,
                soft_wrap=True,
            )

        summary = self.summarize(results)

        self.console.print(
            f"\nRan {summary.total} Test Case(s) in {summary.duration} Nanosecond(s)",
            soft_wrap=True,
        )
        self.console.print(
            f"[green]{summary.passed} Passed[/green]  "
            f"[red]{summary.failed} Failed[/red]  "
            f"[yellow]{summary.skipped} Skipped[/yellow]  "
            f"[magenta]{summary.unknown} Unknown[/magenta]",
            soft_wrap=True,
        )

        return summary.failed_any


def statify(results: Sequence[TestCaseResult]) -> bool:
    """Report on results with a default reporter; True if anything failed."""
    return Reporter().statify(results)
