"""
Type-aware equality and ordering of scalar values.

Operands are classified into a category (signed, unsigned, real, boolean, text)
and widened to that category's canonical form before they are compared, so that
values of different fixed-width representations can be compared without
wraparound. Booleans and strings are never coerced to numbers.
"""

from .constants import INT64_MAX, NUMERIC_CATEGORIES, Category, Ordering
from .exceptions import NotComparableError
from .values import classify, type_name


def is_numeric(category: Category) -> bool:
    """Return True if the category is signed, unsigned or real."""
    return category in NUMERIC_CATEGORIES


def are_equal(a: object, b: object) -> bool:
    """
    Return True if the two values can be considered equal.

    A string only equals a string with the same content and a boolean only equals
    a boolean with the same value, so ``"1"``, ``True`` and ``1`` are all distinct.
    Any pairing of numeric values is decided by ``compare``.

    Raises:
        UnsupportedTypeError: If either value is not a supported scalar
    """
    a_category, a_value = classify(a)
    b_category, b_value = classify(b)

    if a_category == Category.TEXT or b_category == Category.TEXT:
        return a_category == b_category and a_value == b_value
    if a_category == Category.BOOLEAN or b_category == Category.BOOLEAN:
        return a_category == b_category and a_value == b_value
    return compare(a, b) == Ordering.EQUAL


def compare(a: object, b: object) -> Ordering:
    """
    Compare two numeric values.

    Returns EQUAL if ``a == b``, LESS_THAN if ``b < a`` and GREATER_THAN if
    ``b > a``. Integers compared against a real value are converted to float, so
    integers beyond 2**53 lose precision in that pairing.

    Raises:
        NotComparableError: If either value is a boolean or a string
        UnsupportedTypeError: If either value is not a supported scalar
    """
    a_category, a_value = classify(a)
    b_category, b_value = classify(b)

    if not is_numeric(a_category) or not is_numeric(b_category):
        raise NotComparableError(
            f"can't compare {type_name(a)} and {type_name(b)}",
            left_type=type_name(a),
            right_type=type_name(b),
        )

    if a_category == b_category:
        if a_category == Category.REAL:
            return _compare_floats(a_value, b_value)
        return _compare_integers(a_value, b_value)
    if a_category == Category.SIGNED and b_category == Category.UNSIGNED:
        return _compare_sign_mismatch(b_value, a_value).inverse()
    if a_category == Category.UNSIGNED and b_category == Category.SIGNED:
        return _compare_sign_mismatch(a_value, b_value)
    # one side is real
    return _compare_floats(float(a_value), float(b_value))


def _compare_integers(a: int, b: int) -> Ordering:
    if b < a:
        return Ordering.LESS_THAN
    if b == a:
        return Ordering.EQUAL
    return Ordering.GREATER_THAN


def _compare_floats(a: float, b: float) -> Ordering:
    # NaN fails both tests and lands on GREATER_THAN, so it never compares equal
    if b < a:
        return Ordering.LESS_THAN
    if b == a:
        return Ordering.EQUAL
    return Ordering.GREATER_THAN


def _compare_sign_mismatch(unsigned: int, signed: int) -> Ordering:
    """
    Compare an unsigned value against a signed one.

    Neither operand is reinterpreted in the other's representation: a negative
    signed value is below every unsigned value, and an unsigned value above
    INT64_MAX is above every signed value. Only an unsigned value that fits in
    the signed range is converted.
    """
    if signed < 0:
        return Ordering.LESS_THAN
    if unsigned > INT64_MAX:
        return Ordering.LESS_THAN
    return _compare_integers(unsigned, signed)
