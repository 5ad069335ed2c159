"""Per-case counter recorder handed to test bodies."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.markup import escape


@dataclass(frozen=True)
class LoggerCounts:
    """Snapshot of a Logger's four counters."""

    passed: int = 0
    failed: int = 0
    warned: int = 0
    info: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "pass": self.passed,
            "fail": self.failed,
            "warn": self.warned,
            "info": self.info,
        }


class Logger:
    """Counts pass/fail/warn/info signals raised while a test body runs.

    A fresh Logger is built for every executed test case. The counts are
    informational and never decide the case's status.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        """Initialize all counters at zero.

        Args:
            console: Console used to echo messages passed to ``increment_*``
            verbose: Echo messages only when set
        """
        self._console = console
        self._verbose = verbose
        self._pass = 0
        self._fail = 0
        self._warn = 0
        self._info = 0

    def increment_pass(self, message: Optional[str] = None) -> None:
        self._pass += 1
        self._echo("PASS", "green", message)

    def increment_fail(self, message: Optional[str] = None) -> None:
        self._fail += 1
        self._echo("FAIL", "red", message)

    def increment_warn(self, message: Optional[str] = None) -> None:
        self._warn += 1
        self._echo("WARN", "yellow", message)

    def increment_info(self, message: Optional[str] = None) -> None:
        self._info += 1
        self._echo("INFO", "blue", message)

    def get_pass_count(self) -> int:
        return self._pass

    def get_fail_count(self) -> int:
        return self._fail

    def get_warn_count(self) -> int:
        return self._warn

    def get_info_count(self) -> int:
        return self._info

    def counts(self) -> LoggerCounts:
        """Return an immutable snapshot of the current counters."""
        return LoggerCounts(
            passed=self._pass,
            failed=self._fail,
            warned=self._warn,
            info=self._info,
        )

    def _echo(self, label: str, style: str, message: Optional[str]) -> None:
        if message is None or not self._verbose or self._console is None:
            return
        self._console.print(
            f"  [{style}]{label}[/{style}] {escape(message)}", emoji=False, soft_wrap=True
        )
