"""Capabilities required from the items of a :class:`~rationals.Rational`."""
from __future__ import annotations

import numbers
from functools import singledispatch
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")

DEFAULT_RADIX = 10
DEFAULT_DTYPE = np.float64


@runtime_checkable
class RationalItem(Protocol):
    """Operations a numerator/denominator type has to support.

    Identities are not part of the protocol; they are looked up through
    :func:`zero_of` and :func:`one_of` so plain ``int`` qualifies.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __floordiv__(self, other: Any) -> Any: ...

    def __mod__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> bool: ...


# ----------------------------------------------------------------------
# Identities
@singledispatch
def zero_of(value: Any) -> Any:
    """Return the additive identity of ``value``'s type."""
    return type(value)(0)


@singledispatch
def one_of(value: Any) -> Any:
    """Return the multiplicative identity of ``value``'s type."""
    return type(value)(1)


def is_zero(value: Any) -> bool:
    return bool(value == zero_of(value))


def is_one(value: Any) -> bool:
    return bool(value == one_of(value))


# ----------------------------------------------------------------------
# Euclid
def gcd(a: T, b: T) -> T:
    """Greatest common divisor of ``a`` and ``b`` by the Euclidean algorithm.

    The sign of the result is whatever the item's ``%`` produces; for ``int``
    (floor modulo) it follows the sign of ``b``.
    """
    zero = zero_of(b)
    while not b == zero:
        a, b = b, a % b
    return a


# ----------------------------------------------------------------------
# Parsing
def parse_item(item_type: type, text: str, radix: int = DEFAULT_RADIX) -> Any:
    """Parse ``text`` with ``item_type``'s own radix-aware parser.

    Errors raised by the parser are propagated unchanged.
    """
    parser = getattr(item_type, "from_str_radix", None)
    if parser is not None:
        return parser(text, radix)
    if isinstance(item_type, type) and issubclass(item_type, (numbers.Integral, np.integer)):
        value = int(text, radix)
        return value if item_type is int else item_type(value)
    raise TypeError(f"Cannot parse items of type {item_type!r}")


# ----------------------------------------------------------------------
# Evaluation
@singledispatch
def evaluate(value: Any, dtype: Any = DEFAULT_DTYPE) -> Any:
    """Lossy conversion of an exact value to a NumPy floating scalar."""
    raise TypeError(f"Cannot evaluate {type(value)!r}")


@evaluate.register(numbers.Integral)
@evaluate.register(np.integer)
def _evaluate_integral(value, dtype: Any = DEFAULT_DTYPE) -> Any:
    return np.dtype(dtype).type(value)


__all__ = [
    "DEFAULT_DTYPE",
    "DEFAULT_RADIX",
    "RationalItem",
    "evaluate",
    "gcd",
    "is_one",
    "is_zero",
    "one_of",
    "parse_item",
    "zero_of",
]
