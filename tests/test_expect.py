"""Tests for the Expect assertion helpers and their failure reporting."""

import logging
import os
import sys

import _pytest.outcomes
import pytest

from typed_expect import (
    Expect,
    ExpectConfig,
    NotComparableError,
    UnsupportedTypeError,
    float32,
    float64,
    int8,
    int32,
    uint8,
    uint64,
)


@pytest.fixture
def plain() -> Expect:
    """Expect without ANSI colouring."""
    return Expect(ExpectConfig(color=False))


class TestNil:
    """Test nil and not_nil."""

    def test_nil_passes_for_none(self, plain: Expect):
        """Test nil accepts None."""
        plain.nil("value", None)

    def test_nil_fails_for_value(self, plain: Expect):
        """Test nil rejects anything that is not None."""
        with pytest.raises(_pytest.outcomes.Failed, match=r"expected value to be None, got \[\]"):
            plain.nil("value", [])

    def test_not_nil_passes_for_falsy_value(self, plain: Expect):
        """Test not_nil accepts falsy values that are not None."""
        plain.not_nil("value", 0)
        plain.not_nil("value", "")

    def test_not_nil_fails_for_none(self, plain: Expect):
        """Test not_nil rejects None."""
        with pytest.raises(_pytest.outcomes.Failed, match="expected value to be not None"):
            plain.not_nil("value", None)


class TestNoError:
    """Test no_error."""

    def test_passes_without_error(self, plain: Expect):
        """Test no_error accepts None."""
        plain.no_error("parsing header", None)

    def test_fails_with_error(self, plain: Expect):
        """Test no_error reports the action and the error."""
        with pytest.raises(
            _pytest.outcomes.Failed,
            match=r"unexpected error while parsing header: ValueError\('bad magic'\)",
        ):
            plain.no_error("parsing header", ValueError("bad magic"))


class TestDeepEqual:
    """Test deep_equal and not_deep_equal, which use Python equality."""

    def test_containers(self, plain: Expect):
        """Test nested containers compare structurally."""
        plain.deep_equal("config", {"a": [1, 2], "b": None}, {"a": [1, 2], "b": None})

    def test_mismatch(self, plain: Expect):
        """Test a mismatch reports expected and actual values."""
        with pytest.raises(
            _pytest.outcomes.Failed, match=r"expected config to equal \{'a': 2\}, got \{'a': 1\}",
        ):
            plain.deep_equal("config", {"a": 1}, {"a": 2})

    def test_scalars_of_different_kinds_differ(self, plain: Expect):
        """Test deep equality keeps fixed-width kinds apart."""
        with pytest.raises(_pytest.outcomes.Failed):
            plain.deep_equal("count", int8(1), int32(1))

    def test_not_deep_equal(self, plain: Expect):
        """Test not_deep_equal passes for different values and fails for equal ones."""
        plain.not_deep_equal("items", [1, 2], [2, 1])
        with pytest.raises(_pytest.outcomes.Failed, match=r"expected items to not equal \[1, 2\]"):
            plain.not_deep_equal("items", [1, 2], [1, 2])


class TestEqual:
    """Test equal and not_equal, which use the type-aware comparator."""

    def test_mixed_representations(self, plain: Expect):
        """Test equal values in different representations pass."""
        plain.equal("count", int8(5), uint64(5))
        plain.equal("ratio", float64(2.0), int32(2))
        plain.equal("size", 10, 10.0)

    def test_mismatch(self, plain: Expect):
        """Test a mismatch reports both values."""
        with pytest.raises(
            _pytest.outcomes.Failed, match=r"expected ratio to equal int32\(2\), got float32\(2.5\)",
        ):
            plain.equal("ratio", float32(2.5), int32(2))

    def test_no_coercion_from_text_or_bool(self, plain: Expect):
        """Test strings and booleans never match numbers."""
        with pytest.raises(_pytest.outcomes.Failed):
            plain.equal("flag", True, 1)
        with pytest.raises(_pytest.outcomes.Failed):
            plain.equal("name", "1", 1)

    def test_not_equal(self, plain: Expect):
        """Test not_equal passes for distinct values and fails for equal ones."""
        plain.not_equal("flag", True, 1)
        plain.not_equal("wrapped", uint64(2 ** 64 - 1), -1)
        with pytest.raises(_pytest.outcomes.Failed, match=r"expected count to not equal 3"):
            plain.not_equal("count", uint8(3), 3)

    def test_unsupported_type_propagates(self, plain: Expect):
        """Test comparator errors are raised, not reported as failures."""
        with pytest.raises(UnsupportedTypeError):
            plain.equal("value", 1 + 2j, 1)
        with pytest.raises(UnsupportedTypeError):
            plain.not_equal("value", {"a": 1}, {"a": 1})


class TestSliceEqual:
    """Test slice_equal."""

    def test_equal_sequences(self, plain: Expect):
        """Test element-wise type-aware equality."""
        plain.slice_equal("offsets", [uint8(0), uint8(16)], (0, 16.0))
        plain.slice_equal("empty", [], ())

    def test_length_mismatch(self, plain: Expect):
        """Test a length mismatch is reported before elements are compared."""
        with pytest.raises(_pytest.outcomes.Failed, match=r"expected len\(offsets\) to be 3, got 2"):
            plain.slice_equal("offsets", [0, 16], [0, 16, 32])

    def test_element_mismatch(self, plain: Expect):
        """Test the first mismatching element is reported with its index."""
        with pytest.raises(
            _pytest.outcomes.Failed, match=r"expected names\[1\] to equal 'b', got 'c'",
        ):
            plain.slice_equal("names", ["a", "c", "x"], ["a", "b", "y"])

    def test_non_sequence_rejected(self, plain: Expect):
        """Test non-sequence arguments raise TypeError."""
        with pytest.raises(TypeError, match="non-sequence type int"):
            plain.slice_equal("values", 1, [1])
        with pytest.raises(TypeError, match="non-sequence type str"):
            plain.slice_equal("values", [1], "1")
        with pytest.raises(TypeError, match="non-sequence type set"):
            plain.slice_equal("values", {1}, [1])

    def test_non_comparable_elements_propagate(self, plain: Expect):
        """Test unsupported elements raise instead of failing."""
        with pytest.raises(UnsupportedTypeError):
            plain.slice_equal("values", [None], [None])


class TestFailureReporting:
    """Test the location, colouring and logging of failure messages."""

    def test_reports_calling_line(self, plain: Expect):
        """Test the message names this file and the line of the assertion."""
        line = sys._getframe().f_lineno + 2
        with pytest.raises(_pytest.outcomes.Failed) as exc_info:
            plain.equal("count", 1, 2)
        assert exc_info.value.msg == f"test_expect.py:{line} FAIL expected count to equal 2, got 1"

    def test_full_path(self):
        """Test full_path reports the absolute file name."""
        expect = Expect(ExpectConfig(color=False, full_path=True))
        with pytest.raises(_pytest.outcomes.Failed) as exc_info:
            expect.not_nil("value", None)
        path = exc_info.value.msg.split(" FAIL ")[0].rsplit(":", 1)[0]
        assert os.path.isabs(path)
        assert os.path.basename(path) == "test_expect.py"

    def test_color(self):
        """Test the default configuration wraps the message in ANSI red."""
        expect = Expect()
        with pytest.raises(_pytest.outcomes.Failed) as exc_info:
            expect.nil("value", 1)
        assert exc_info.value.msg.startswith("\033[0;31mtest_expect.py:")
        assert exc_info.value.msg.endswith("\033[0m")

    def test_failure_has_no_traceback(self, plain: Expect):
        """Test failures are reported without a Python traceback."""
        with pytest.raises(_pytest.outcomes.Failed) as exc_info:
            plain.nil("value", 1)
        assert exc_info.value.pytrace is False

    def test_failure_is_logged(self, plain: Expect, caplog: pytest.LogCaptureFixture):
        """Test failures are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="typed_expect.expect"):
            with pytest.raises(_pytest.outcomes.Failed):
                plain.nil("value", 1)
        assert "event=expect_failed" in caplog.text
        assert "test_expect.py:" in caplog.text

    def test_failure_is_not_an_expect_error(self, plain: Expect):
        """Test a failed expectation is not a comparator error."""
        with pytest.raises(_pytest.outcomes.Failed) as exc_info:
            plain.equal("value", 1, 2)
        assert not isinstance(exc_info.value, NotComparableError | UnsupportedTypeError)

    def test_default_config(self):
        """Test Expect uses colour and basenames by default."""
        expect = Expect()
        assert expect.config.color is True
        assert expect.config.full_path is False
