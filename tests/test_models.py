"""Tests for the core data models and the logger."""

import dataclasses

import pytest

from testharness.core.logger import Logger, LoggerCounts
from testharness.core.models import TestCase, TestCaseResult, TestCaseStatus


class TestTestCaseStatus:
    """Tests for TestCaseStatus enum."""

    def test_status_values(self):
        """Test that all expected statuses exist."""
        assert TestCaseStatus.PASSED.value == "passed"
        assert TestCaseStatus.FAILED.value == "failed"
        assert TestCaseStatus.SKIPPED.value == "skipped"
        assert TestCaseStatus.UNKNOWN.value == "unknown"

    def test_closed_set(self):
        """Test that there are exactly four statuses."""
        assert len(TestCaseStatus) == 4


class TestTestCase:
    """Tests for TestCase."""

    def test_new(self):
        """Test construction keeps inputs as-is."""

        def body(logger):
            return TestCaseStatus.PASSED

        case = TestCase.new("title", "criteria", body)
        assert case.title == "title"
        assert case.criteria == "criteria"
        assert case.body is body

    def test_no_validation(self):
        """Test empty strings are accepted."""
        case = TestCase.new("", "", lambda logger: TestCaseStatus.SKIPPED)
        assert case.title == ""

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        case = TestCase.new("t", "c", lambda logger: TestCaseStatus.PASSED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            case.title = "other"


class TestTestCaseResult:
    """Tests for TestCaseResult."""

    def test_defaults(self):
        """Test default counts and error."""
        result = TestCaseResult(
            title="t", criteria="c", duration=10, status=TestCaseStatus.PASSED
        )
        assert result.counts == LoggerCounts()
        assert result.error is None
        assert result.failed is False

    @pytest.mark.parametrize(
        "status,expected",
        [
            (TestCaseStatus.PASSED, False),
            (TestCaseStatus.FAILED, True),
            (TestCaseStatus.SKIPPED, False),
            (TestCaseStatus.UNKNOWN, True),
        ],
    )
    def test_failed(self, status, expected):
        """Test which statuses count against the verdict."""
        result = TestCaseResult(title="t", criteria="c", duration=0, status=status)
        assert result.failed is expected

    def test_to_dict(self):
        """Test converting to dictionary."""
        result = TestCaseResult(
            title="t",
            criteria="c",
            duration=42,
            status=TestCaseStatus.FAILED,
            counts=LoggerCounts(passed=1, failed=2),
            error="boom",
        )

        d = result.to_dict()
        assert d["title"] == "t"
        assert d["duration"] == 42
        assert d["status"] == "failed"
        assert d["counts"] == {"pass": 1, "fail": 2, "warn": 0, "info": 0}
        assert d["error"] == "boom"


class TestLogger:
    """Tests for the per-case Logger."""

    def test_starts_at_zero(self):
        """Test all counters start at zero."""
        logger = Logger()
        assert logger.get_pass_count() == 0
        assert logger.get_fail_count() == 0
        assert logger.get_warn_count() == 0
        assert logger.get_info_count() == 0

    def test_counters_are_independent(self):
        """Test each increment only touches its own counter."""
        logger = Logger()
        logger.increment_pass()
        logger.increment_pass()
        logger.increment_fail()
        logger.increment_warn()
        logger.increment_warn()
        logger.increment_warn()

        assert logger.counts() == LoggerCounts(passed=2, failed=1, warned=3, info=0)

    def test_snapshot_is_detached(self):
        """Test that later increments don't change an earlier snapshot."""
        logger = Logger()
        snapshot = logger.counts()
        logger.increment_info()
        assert snapshot.info == 0
        assert logger.get_info_count() == 1

    def test_messages_echoed_when_verbose(self, console):
        """Test messages are printed only in verbose mode."""
        quiet = Logger(console=console)
        quiet.increment_info("hidden")

        loud = Logger(console=console, verbose=True)
        loud.increment_fail("shown [not markup]")

        output = console.file.getvalue()
        assert "hidden" not in output
        assert "FAIL shown [not markup]" in output
