"""Resolve suites named by import path."""

import importlib
import inspect
from typing import Any

from testharness.core.models import TestCase
from testharness.core.testable import SuiteError, Testable


class _CaseList:
    """Adapts a plain list of test cases to the Testable protocol."""

    def __init__(self, cases: list[TestCase]):
        self._cases = cases

    def tests(self) -> list[TestCase]:
        return self._cases


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax.
    """
    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from e


def load_suite(path: str) -> Testable:
    """Import a suite by path.

    The target may be a suite instance, a suite class (instantiated with no
    arguments), a list of test cases, or a function returning one of those.
    """
    target = import_string(path)

    if inspect.isclass(target):
        target = target()
    elif callable(target) and not isinstance(target, Testable):
        target = target()

    if isinstance(target, Testable):
        return target
    if isinstance(target, (list, tuple)) and all(isinstance(t, TestCase) for t in target):
        return _CaseList(list(target))

    raise SuiteError(f"'{path}' is not a test suite (got {type(target).__name__})")
