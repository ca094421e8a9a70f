"""
typed-expect - type-aware assertions for tests.

Compares scalars across fixed-width representations (signed, unsigned and real
numbers, booleans and strings) without wraparound or silent coercion, and fails
the running test with the file and line of the failing assertion.
"""

from .constants import Category, Kind, Ordering
from .comparator import are_equal, compare, is_numeric
from .config import ExpectConfig
from .exceptions import ExpectError, NotComparableError, UnsupportedTypeError
from .expect import Expect
from .values import (
    Scalar,
    classify,
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    to_scalar,
    uint8,
    uint16,
    uint32,
    uint64,
)

__version__ = "0.1.0"
__all__ = [
    "Category",
    "Expect",
    "ExpectConfig",
    "ExpectError",
    "Kind",
    "NotComparableError",
    "Ordering",
    "Scalar",
    "UnsupportedTypeError",
    "are_equal",
    "classify",
    "compare",
    "float32",
    "float64",
    "int16",
    "int32",
    "int64",
    "int8",
    "is_numeric",
    "to_scalar",
    "uint16",
    "uint32",
    "uint64",
    "uint8",
]
