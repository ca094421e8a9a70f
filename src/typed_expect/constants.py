"""
Constants and enums for typed-expect.

This module defines the representation kinds a comparison operand can have, the
comparison categories those kinds fall into, and the ordering result returned by
the comparator. Kind and Category inherit from str so they read naturally in
error messages and can be used interchangeably with their string values.
"""

from enum import Enum


class Kind(str, Enum):
    """Fixed-width representation of a scalar value."""

    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    UINT8 = 'uint8'
    UINT16 = 'uint16'
    UINT32 = 'uint32'
    UINT64 = 'uint64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    BOOL = 'bool'
    STR = 'str'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)


class Category(str, Enum):
    """Comparison category of a value; decides which comparison rules apply."""

    SIGNED = 'signed'
    UNSIGNED = 'unsigned'
    REAL = 'real'
    BOOLEAN = 'boolean'
    TEXT = 'text'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)


class Ordering(int, Enum):
    """
    Result of an ordering comparison.

    Describes the second operand relative to the first: ``compare(a, b)`` is
    LESS_THAN when ``b < a`` and GREATER_THAN when ``b > a``.
    """

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1

    def inverse(self) -> 'Ordering':
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)


KIND_CATEGORIES: dict[Kind, Category] = {
    Kind.INT8: Category.SIGNED,
    Kind.INT16: Category.SIGNED,
    Kind.INT32: Category.SIGNED,
    Kind.INT64: Category.SIGNED,
    Kind.UINT8: Category.UNSIGNED,
    Kind.UINT16: Category.UNSIGNED,
    Kind.UINT32: Category.UNSIGNED,
    Kind.UINT64: Category.UNSIGNED,
    Kind.FLOAT32: Category.REAL,
    Kind.FLOAT64: Category.REAL,
    Kind.BOOL: Category.BOOLEAN,
    Kind.STR: Category.TEXT,
}

NUMERIC_CATEGORIES = frozenset({Category.SIGNED, Category.UNSIGNED, Category.REAL})

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

# Inclusive (min, max) for every integer kind
INTEGER_BOUNDS: dict[Kind, tuple[int, int]] = {
    Kind.INT8: (-(2 ** 7), 2 ** 7 - 1),
    Kind.INT16: (-(2 ** 15), 2 ** 15 - 1),
    Kind.INT32: (-(2 ** 31), 2 ** 31 - 1),
    Kind.INT64: (INT64_MIN, INT64_MAX),
    Kind.UINT8: (0, 2 ** 8 - 1),
    Kind.UINT16: (0, 2 ** 16 - 1),
    Kind.UINT32: (0, 2 ** 32 - 1),
    Kind.UINT64: (0, UINT64_MAX),
}
