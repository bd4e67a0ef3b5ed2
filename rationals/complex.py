"""Generic complex numbers and their interplay with :class:`Rational`.

``Complex`` works over any item type. With integer parts it is a Gaussian
integer and can itself be the item of a :class:`Rational`; with
:class:`Rational` parts it is an exact complex number. The two nestings are
converted into each other with :func:`complex_of_rational` and
:func:`rational_of_complex`.
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, Optional

import numpy as np

from .rational import Rational
from .traits import DEFAULT_DTYPE, DEFAULT_RADIX, evaluate, one_of, parse_item, zero_of

logger = logging.getLogger(__name__)


def _nearest(value: Any, modulus: Any) -> Any:
    """Round ``value / modulus`` to the nearest item, ties upward; ``modulus > 0``."""
    two = one_of(modulus) + one_of(modulus)
    return (two * value + modulus) // (two * modulus)


def _is_negative(value: Any) -> bool:
    try:
        return bool(value < zero_of(value))
    except TypeError:
        return False


class Complex:
    """``re + im*i`` over an arbitrary item type."""

    __slots__ = ("_re", "_im")

    def __init__(self, re: Any = 0, im: Any = None) -> None:
        if im is None:
            im = zero_of(re)
        self._re = re
        self._im = im

    @classmethod
    def zero(cls, item_type: Callable[[int], Any] = int) -> "Complex":
        return cls(item_type(0), item_type(0))

    @classmethod
    def one(cls, item_type: Callable[[int], Any] = int) -> "Complex":
        return cls(item_type(1), item_type(0))

    @classmethod
    def i(cls, item_type: Callable[[int], Any] = int) -> "Complex":
        return cls(item_type(0), item_type(1))

    @classmethod
    def from_str_radix(
        cls, text: str, radix: int = DEFAULT_RADIX, item_type: type = int
    ) -> "Complex":
        """Parse ``"a"``, ``"bi"``, ``"a+bi"`` or ``"a-bi"`` in base ``radix``."""
        body = text.strip()
        if not body.endswith("i"):
            return cls(parse_item(item_type, body, radix))

        body = body[:-1]
        split = max(body.rfind("+"), body.rfind("-"))
        if split > 0:
            re_text, im_text = body[:split], body[split:]
        else:
            re_text, im_text = "", body
        if im_text in ("", "+", "-"):
            im_text += "1"
        im = parse_item(item_type, im_text, radix)
        re = parse_item(item_type, re_text, radix) if re_text else zero_of(im)
        return cls(re, im)

    @classmethod
    def from_rational(cls, value: Rational) -> "Complex":
        return complex_of_rational(value)

    # ------------------------------------------------------------------
    # Properties
    @property
    def re(self) -> Any:
        return self._re

    @property
    def im(self) -> Any:
        return self._im

    def conj(self) -> "Complex":
        return Complex(self._re, zero_of(self._im) - self._im)

    def norm_sqr(self) -> Any:
        return self._re * self._re + self._im * self._im

    def evaluate(self, dtype: Any = np.complex128) -> Any:
        """Evaluate both parts and combine them into a NumPy complex scalar.

        ``dtype`` may be a complex type or the matching real type
        (``float32`` selects ``complex64``).
        """
        kind = np.result_type(np.dtype(dtype), np.complex64)
        part = np.finfo(kind).dtype
        re = evaluate(self._re, part)
        im = evaluate(self._im, part)
        return kind.type(complex(re, im))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self) -> str:
        if _is_negative(self._im):
            return f"{self._re}-{zero_of(self._im) - self._im}i"
        return f"{self._re}+{self._im}i"

    # ------------------------------------------------------------------
    # Arithmetic
    def _coerce(self, value: Any) -> Optional["Complex"]:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (numbers.Integral, np.integer, Rational)):
            return Complex(value)
        if isinstance(value, type(self._re)) and not isinstance(value, np.ndarray):
            return Complex(value)
        return None

    def __add__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re + other._re, self._im + other._im)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re - other._re, self._im - other._im)

    def __rsub__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b, c, d = self._re, self._im, other._re, other._im
        return Complex(a * c - b * d, a * d + b * c)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b, c, d = self._re, self._im, other._re, other._im
        norm = other.norm_sqr()
        return Complex((a * c + b * d) / norm, (b * c - a * d) / norm)

    def __rtruediv__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__truediv__(self)

    def __floordiv__(self, other: Any) -> Any:
        """Gaussian quotient: the exact quotient rounded to the nearest point."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b, c, d = self._re, self._im, other._re, other._im
        norm = other.norm_sqr()
        return Complex(_nearest(a * c + b * d, norm), _nearest(b * c - a * d, norm))

    def __mod__(self, other: Any) -> Any:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self - other * (self // other)

    def __neg__(self) -> "Complex":
        return Complex(zero_of(self._re) - self._re, zero_of(self._im) - self._im)

    def __pos__(self) -> "Complex":
        return self

    def __eq__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return bool(self._re == other._re and self._im == other._im)

    def __hash__(self) -> int:
        return hash((self._re, self._im))


@zero_of.register(Complex)
def _zero_of_complex(value: Complex) -> Complex:
    return Complex(zero_of(value.re), zero_of(value.im))


@one_of.register(Complex)
def _one_of_complex(value: Complex) -> Complex:
    return Complex(one_of(value.re), zero_of(value.im))


@evaluate.register(Complex)
def _evaluate_complex(value: Complex, dtype: Any = DEFAULT_DTYPE) -> Any:
    return value.evaluate(dtype)


# ----------------------------------------------------------------------
# Nesting conversions
def complex_of_rational(value: Rational) -> Complex:
    """Turn ``num/den`` over complex items into a complex of rationals.

    Both parts are multiplied by ``conj(den)``, which leaves the real
    ``|den|^2`` underneath. An undefined ``0/0`` yields undefined parts.
    """
    num, den = value.numerator, value.denominator
    if not isinstance(num, Complex):
        num = Complex(num)
    if not isinstance(den, Complex):
        den = Complex(den)
    magnitude = den.re * den.re + den.im * den.im
    re = Rational(num.re * den.re + num.im * den.im, magnitude)
    im = Rational(num.im * den.re - num.re * den.im, magnitude)
    logger.debug("converted %s to %s", value, Complex(re, im))
    return Complex(re, im)


def rational_of_complex(value: Complex) -> Rational:
    """Put both rational parts of ``value`` over their common denominator."""
    re, im = value.re, value.im
    if not isinstance(re, Rational):
        re = Rational(re)
    if not isinstance(im, Rational):
        im = Rational(im)
    numerator = Complex(
        re.numerator * im.denominator, im.numerator * re.denominator
    )
    denominator = Complex(re.denominator * im.denominator)
    return Rational(numerator, denominator)


__all__ = ["Complex", "complex_of_rational", "rational_of_complex"]
