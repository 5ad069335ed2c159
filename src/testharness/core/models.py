"""Data models for test cases and their results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from testharness.core.logger import Logger, LoggerCounts


class TestCaseStatus(str, Enum):
    """Terminal status returned by a test body."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    UNKNOWN = "unknown"


TestBody = Callable[[Logger], TestCaseStatus]


@dataclass(frozen=True)
class TestCase:
    """A named check: display title, criteria text and the body to run."""

    __test__ = False

    title: str
    criteria: str
    body: TestBody

    @classmethod
    def new(cls, title: str, criteria: str, body: TestBody) -> "TestCase":
        """Build a test case. Inputs are taken as-is."""
        return cls(title=title, criteria=criteria, body=body)


@dataclass(frozen=True)
class TestCaseResult:
    """Outcome of executing a single test case."""

    __test__ = False

    title: str
    criteria: str
    duration: int
    status: TestCaseStatus
    counts: LoggerCounts = field(default_factory=LoggerCounts)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """True when this result counts against the run verdict."""
        return self.status in (TestCaseStatus.FAILED, TestCaseStatus.UNKNOWN)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "criteria": self.criteria,
            "duration": self.duration,
            "status": self.status.value,
            "counts": self.counts.to_dict(),
            "error": self.error,
        }
