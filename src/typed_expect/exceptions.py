"""
Custom exception hierarchy for typed-expect.

Both comparator errors signal misuse of the API by the calling test, not a
failed expectation. A failed expectation terminates the test through pytest's
own failure outcome and is never reported with these classes.
"""


class ExpectError(Exception):
    """Base exception for typed-expect package."""

    pass


class UnsupportedTypeError(ExpectError, TypeError):
    """
    A value's representation is outside the supported scalar kinds.

    Raised for None, complex numbers, containers, arbitrary objects and integers
    that do not fit in 64 bits.
    """

    def __init__(self, message: str, value_type: str | None = None):
        super().__init__(message)
        self.value_type = value_type


class NotComparableError(ExpectError, TypeError):
    """An ordering comparison was attempted on a boolean or text operand."""

    def __init__(self, message: str, left_type: str | None = None, right_type: str | None = None):
        super().__init__(message)
        self.left_type = left_type
        self.right_type = right_type
