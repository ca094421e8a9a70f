"""
Scalar values for typed comparisons.

Python has a single unbounded ``int`` and a single double precision ``float``, so
the fixed-width representations a comparison has to reason about are made
explicit here: a ``Scalar`` is a tagged union of a ``Kind`` and a value that is
valid for that kind. ``to_scalar`` is the adapter at the API boundary that turns
native Python values into Scalars and rejects everything outside the closed set.
"""

import math
import struct
from collections.abc import Callable
from typing import Any, ClassVar

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr, ValidationInfo, field_validator  # noqa: E501

from .constants import INT64_MAX, INT64_MIN, INTEGER_BOUNDS, KIND_CATEGORIES, UINT64_MAX, Category, Kind  # noqa: E501
from .exceptions import UnsupportedTypeError


def _round_float32(value: float) -> float:
    """Round a double to the nearest single precision value."""
    try:
        rounded = struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        rounded = math.inf
    if math.isinf(rounded) and math.isfinite(value):
        raise ValueError(f"{value!r} is out of range for float32")
    return rounded


class Scalar(BaseModel):
    """
    An immutable scalar tagged with its fixed-width representation.

    Integer kinds hold a Python ``int`` inside the kind's bounds, real kinds hold
    a ``float`` (rounded to single precision for float32), ``bool`` and ``str``
    hold their native values.
    """

    model_config: ClassVar[dict[str, Any]] = {'extra': 'forbid', 'frozen': True}

    kind: Kind = Field(..., description="Fixed-width representation of the value")
    value: StrictBool | StrictInt | StrictFloat | StrictStr = Field(
        ..., description="The value, restated in the kind's native storage",
    )

    @field_validator('value')
    @classmethod
    def validate_value_for_kind(
            cls, value: bool | int | float | str, info: ValidationInfo,
        ) -> bool | int | float | str:
        """Check the value against its kind and normalize real values."""
        kind = info.data.get('kind')
        if kind is None:
            # kind failed its own validation; pydantic reports that error
            return value

        if kind in INTEGER_BOUNDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{kind} requires an integer, got: {type(value).__name__}")
            low, high = INTEGER_BOUNDS[kind]
            if not low <= value <= high:
                raise ValueError(f"{value} is out of range for {kind} [{low}, {high}]")
            return value

        if kind in (Kind.FLOAT32, Kind.FLOAT64):
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValueError(f"{kind} requires a number, got: {type(value).__name__}")
            try:
                value = float(value)
            except OverflowError:
                raise ValueError(f"integer is out of range for {kind}") from None
            return _round_float32(value) if kind == Kind.FLOAT32 else value

        if kind == Kind.BOOL and not isinstance(value, bool):
            raise ValueError(f"bool requires a boolean, got: {type(value).__name__}")
        if kind == Kind.STR and not isinstance(value, str):
            raise ValueError(f"str requires a string, got: {type(value).__name__}")
        return value

    @property
    def category(self) -> Category:
        """Return the comparison category of this scalar."""
        return KIND_CATEGORIES[self.kind]

    def canonical(self) -> bool | int | float | str:
        """
        Return the value widened to its category's canonical width.

        Signed and unsigned values come back as ``int`` (always within the 64-bit
        range of their category), real values as a double precision ``float``.
        Booleans and strings are returned unchanged.
        """
        if self.category in (Category.SIGNED, Category.UNSIGNED):
            return int(self.value)
        if self.category == Category.REAL:
            return float(self.value)
        return self.value

    def __repr__(self) -> str:
        return f"{self.kind}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


def _scalar_factory(kind: Kind) -> Callable[[Any], Scalar]:
    def factory(value: Any) -> Scalar:  # noqa: ANN401
        return Scalar(kind=kind, value=value)

    factory.__name__ = factory.__qualname__ = kind.value
    factory.__doc__ = f"Wrap ``value`` as a {kind.value} scalar."
    return factory


int8 = _scalar_factory(Kind.INT8)
int16 = _scalar_factory(Kind.INT16)
int32 = _scalar_factory(Kind.INT32)
int64 = _scalar_factory(Kind.INT64)
uint8 = _scalar_factory(Kind.UINT8)
uint16 = _scalar_factory(Kind.UINT16)
uint32 = _scalar_factory(Kind.UINT32)
uint64 = _scalar_factory(Kind.UINT64)
float32 = _scalar_factory(Kind.FLOAT32)
float64 = _scalar_factory(Kind.FLOAT64)


def type_name(value: object) -> str:
    """Name the representation of ``value`` for error messages."""
    if isinstance(value, Scalar):
        return str(value.kind)
    return type(value).__name__


def to_scalar(value: object) -> Scalar:
    """
    Convert a native Python value into a Scalar.

    Mapping:
    - Scalar: returned unchanged
    - bool: bool (checked before int, bool is an int subclass)
    - str: str
    - int: int64 when it fits, uint64 for [2**63, 2**64), otherwise unsupported
    - float: float64

    Raises:
        UnsupportedTypeError: For any other type, and for integers beyond 64 bits
    """
    if isinstance(value, Scalar):
        return value
    if isinstance(value, bool):
        return Scalar(kind=Kind.BOOL, value=value)
    if isinstance(value, str):
        return Scalar(kind=Kind.STR, value=value)
    if isinstance(value, int):
        if INT64_MIN <= value <= INT64_MAX:
            return Scalar(kind=Kind.INT64, value=value)
        if INT64_MAX < value <= UINT64_MAX:
            return Scalar(kind=Kind.UINT64, value=value)
        raise UnsupportedTypeError(
            f"unsupported type for comparison int: {value} does not fit in 64 bits",
            value_type='int',
        )
    if isinstance(value, float):
        return Scalar(kind=Kind.FLOAT64, value=value)
    raise UnsupportedTypeError(
        f"unsupported type for comparison {type_name(value)}",
        value_type=type_name(value),
    )


def classify(value: object) -> tuple[Category, bool | int | float | str]:
    """Return the category of ``value`` and its canonical form."""
    scalar = to_scalar(value)
    return scalar.category, scalar.canonical()
