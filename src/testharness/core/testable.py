"""Suite protocol: anything that can hand over its own test cases."""

from typing import Protocol, Sequence, runtime_checkable

from testharness.core.models import TestCase


@runtime_checkable
class Testable(Protocol):
    """A grouping of related test cases.

    Implementations produce an ordered sequence of TestCase values. The
    runner depends only on this method, never on concrete suite types.
    """

    def tests(self) -> Sequence[TestCase]:
        """Return the suite's test cases in execution order."""
        ...


class SuiteError(TypeError):
    """Raised when an object handed to the runner is not a suite."""
