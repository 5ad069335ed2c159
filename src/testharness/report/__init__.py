"""Run summaries and the pass/fail verdict."""

from testharness.report.statify import Reporter, RunSummary, statify

__all__ = ["Reporter", "RunSummary", "statify"]
