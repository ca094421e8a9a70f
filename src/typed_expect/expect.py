"""
Assertion helpers for tests.

``Expect`` compares actual values against expectations and terminates the running
test with a message that names the file and line of the failing assertion:

    def test_parse(expect):
        header = parse_header(data)
        expect.equal("version", header.version, uint8(3))
        expect.slice_equal("offsets", header.offsets, [0, 16, 32])
"""

import logging
import os
import sys
from collections.abc import Sequence

import pytest

from .comparator import are_equal
from .config import ExpectConfig

logger = logging.getLogger(__name__)

_RED = '\033[0;31m'
_RESET = '\033[0m'


class Expect:
    """
    Assertions that fail the current test on mismatch.

    ``equal``/``not_equal``/``slice_equal`` use the type-aware comparator, so an
    ``int32`` equals a ``float64`` of the same value while ``"1"``, ``True`` and
    ``1`` all differ. ``deep_equal``/``not_deep_equal`` use Python's ``==``.
    Comparator errors (unsupported or non-comparable operands) propagate as
    exceptions and are not reported as test failures.
    """

    def __init__(self, config: ExpectConfig | None = None):
        self.config = config or ExpectConfig()

    def nil(self, name: str, actual: object) -> None:
        """Assert that ``actual`` is None."""
        if actual is not None:
            self._fail(1, f"expected {name} to be None, got {actual!r}")

    def not_nil(self, name: str, actual: object) -> None:
        """Assert that ``actual`` is not None."""
        if actual is None:
            self._fail(1, f"expected {name} to be not None")

    def no_error(self, action: str, err: BaseException | None) -> None:
        """Assert that ``err`` is None; ``action`` describes what was being done."""
        if err is not None:
            self._fail(1, f"unexpected error while {action}: {err!r}")

    def deep_equal(self, name: str, actual: object, expected: object) -> None:
        """Assert that ``actual == expected``."""
        if actual != expected:
            self._fail(1, f"expected {name} to equal {expected!r}, got {actual!r}")

    def not_deep_equal(self, name: str, actual: object, not_expected: object) -> None:
        """Assert that ``actual != not_expected``."""
        if actual == not_expected:
            self._fail(1, f"expected {name} to not equal {not_expected!r}")

    def equal(self, name: str, actual: object, expected: object) -> None:
        """Assert that two scalars are equal under the type-aware comparator."""
        if not are_equal(actual, expected):
            self._fail(1, f"expected {name} to equal {expected!r}, got {actual!r}")

    def not_equal(self, name: str, actual: object, not_expected: object) -> None:
        """Assert that two scalars differ under the type-aware comparator."""
        if are_equal(actual, not_expected):
            self._fail(1, f"expected {name} to not equal {not_expected!r}")

    def slice_equal(self, name: str, actual: Sequence, expected: Sequence) -> None:
        """
        Assert that two sequences hold equal scalars at the same indices.

        Raises:
            TypeError: If either argument is not a sequence (strings and bytes
                are rejected too)
        """
        actual_items = _as_list(actual)
        expected_items = _as_list(expected)

        if len(actual_items) != len(expected_items):
            self._fail(
                1,
                f"expected len({name}) to be {len(expected_items)}, got {len(actual_items)}",
            )
        for i, (value, expected_value) in enumerate(zip(actual_items, expected_items)):
            if not are_equal(value, expected_value):
                self._fail(1, f"expected {name}[{i}] to equal {expected_value!r}, got {value!r}")

    def _fail(self, stack_depth: int, message: str) -> None:
        """Fail the test, reporting the frame ``stack_depth`` levels above the caller."""
        frame = sys._getframe(stack_depth + 1)
        filename = frame.f_code.co_filename
        if not self.config.full_path:
            filename = os.path.basename(filename)
        location = f"{filename}:{frame.f_lineno}"
        del frame

        logger.debug("event=expect_failed location=%s message=%s", location, message)
        text = f"{location} FAIL {message}"
        if self.config.color:
            text = f"{_RED}{text}{_RESET}"
        pytest.fail(text, pytrace=False)


def _as_list(value: object) -> list:
    if isinstance(value, str | bytes | bytearray) or not isinstance(value, Sequence):
        raise TypeError(f"slice_equal() given a non-sequence type {type(value).__name__}")
    return list(value)
