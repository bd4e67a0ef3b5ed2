"""Exact rational numbers over a generic item type with NumPy interoperability."""
from __future__ import annotations

import logging
import numbers
import operator
import re
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .traits import (
    DEFAULT_DTYPE,
    DEFAULT_RADIX,
    RationalItem,
    evaluate,
    gcd,
    is_one,
    is_zero,
    one_of,
    parse_item,
    zero_of,
)

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[/:]")


def _is_integral(value: Any) -> bool:
    return isinstance(value, (numbers.Integral, np.integer))


class Rational:
    """A numerator/denominator pair kept in reduced form.

    ``Rational(a, b)`` divides both parts by their greatest common divisor.
    A zero denominator gives the undefined value ``0/0`` instead of raising,
    so division by zero propagates through later arithmetic as a value.
    ``Rational(a)`` is ``a/1`` and ``Rational((a, b))`` is ``Rational(a, b)``.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, numerator: Any = 0, denominator: Any = None) -> None:
        if denominator is None and isinstance(numerator, tuple):
            if len(numerator) != 2:
                raise TypeError(
                    f"expected a (numerator, denominator) pair, got {len(numerator)} values"
                )
            numerator, denominator = numerator

        if denominator is None:
            # A bare item is already in lowest terms over one.
            self._numerator = numerator
            self._denominator = one_of(numerator)
            return

        self._numerator, self._denominator = self._normalize(numerator, denominator)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def _from_parts(cls, numerator: Any, denominator: Any) -> "Rational":
        value = cls.__new__(cls)
        value._numerator = numerator
        value._denominator = denominator
        return value

    @classmethod
    def zero(cls, item_type: Callable[[int], Any] = int) -> "Rational":
        return cls._from_parts(item_type(0), item_type(1))

    @classmethod
    def one(cls, item_type: Callable[[int], Any] = int) -> "Rational":
        return cls._from_parts(item_type(1), item_type(1))

    @classmethod
    def from_str_radix(
        cls, text: str, radix: int = DEFAULT_RADIX, item_type: type = int
    ) -> "Rational":
        """Parse ``"<num>/<den>"`` (or ``"<num>:<den>"``) in base ``radix``.

        Each side is parsed by ``item_type``'s own parser and its errors are
        propagated unchanged. Only the first separator splits the text.
        """
        tokens = _SEPARATOR.split(text, maxsplit=1)
        if len(tokens) < 2:
            raise ValueError(f"missing denominator in rational literal {text!r}")
        numerator = parse_item(item_type, tokens[0], radix)
        denominator = parse_item(item_type, tokens[1], radix)
        logger.debug("parsed %r (radix %d) as %r/%r", text, radix, numerator, denominator)
        return cls(numerator, denominator)

    @classmethod
    def from_str(cls, text: str, item_type: type = int) -> "Rational":
        return cls.from_str_radix(text, DEFAULT_RADIX, item_type)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> Any:
        return self._numerator

    @property
    def denominator(self) -> Any:
        return self._denominator

    def as_tuple(self) -> Tuple[Any, Any]:
        return self._numerator, self._denominator

    def inverse(self) -> "Rational":
        """Swap numerator and denominator; the result is already reduced."""
        return self._from_parts(self._denominator, self._numerator)

    def is_zero(self) -> bool:
        """True for ``0/1``; the undefined ``0/0`` is not zero."""
        return is_zero(self._numerator) and not is_zero(self._denominator)

    def is_one(self) -> bool:
        return is_one(self._denominator) and is_one(self._numerator)

    def is_undefined(self) -> bool:
        """True for the ``0/0`` value produced by a zero denominator."""
        return is_zero(self._denominator)

    def compare(self, other: Any) -> Optional[int]:
        """Return -1, 0 or 1, or ``None`` when ``self`` has a zero numerator.

        Only ``self`` is inspected for the zero numerator, so ``a < b`` and
        ``b > a`` may disagree when ``b`` is zero or undefined.
        """
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            raise TypeError(f"Cannot compare Rational with {type(other)!r}")
        if is_zero(self._numerator):
            return None
        left = self._numerator * other_rat._denominator
        right = other_rat._numerator * self._denominator
        return int(left > right) - int(left < right)

    def evaluate(self, dtype: Any = DEFAULT_DTYPE) -> Any:
        """Approximate the value as a NumPy floating scalar of ``dtype``.

        ``0/0`` evaluates to ``nan``.
        """
        kind = np.dtype(dtype).type
        with np.errstate(divide="ignore", invalid="ignore"):
            return kind(kind(self._numerator) / kind(self._denominator))

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return float(self.evaluate(np.float64))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator!r}, {self._denominator!r})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec or format_spec == "r":
            return str(self)
        return format(self.evaluate(), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(num: Any, den: Any) -> Tuple[Any, Any]:
        if is_zero(den):
            zero = zero_of(den)
            return zero, zero
        if is_zero(num):
            return zero_of(num), one_of(num)
        divisor = gcd(num, den)
        return num // divisor, den // divisor

    def _coerce_scalar(self, value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, np.ndarray):
            return None
        if _is_integral(value) and _is_integral(self._numerator):
            return Rational(value)
        if isinstance(value, type(self._numerator)) and isinstance(value, RationalItem):
            return Rational(value)
        return None

    def _binary_operation(self, other: Any, op, *, reflected: bool = False):
        if isinstance(other, np.ndarray):
            if reflected:
                func = lambda x: op(self._require_scalar(x), self)  # noqa: E731
            else:
                func = lambda x: op(self, self._require_scalar(x))  # noqa: E731
            return np.vectorize(func, otypes=[object])(other)
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            return NotImplemented
        if reflected:
            return op(other_rat, self)
        return op(self, other_rat)

    def _require_scalar(self, value: Any) -> "Rational":
        coerced = self._coerce_scalar(value)
        if coerced is None:
            raise TypeError(f"Cannot interpret {type(value)!r} as Rational")
        return coerced

    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        return Rational(
            a._numerator * b._denominator + a._denominator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        return Rational(
            a._numerator * b._denominator - a._denominator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        return Rational(a._numerator * b._numerator, a._denominator * b._denominator)

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        return Rational._mul(a, b.inverse())

    @staticmethod
    def _mod(a: "Rational", b: "Rational") -> "Rational":
        # (a.num % b.num) * a.den / (b.den * a.den); not the floored rational modulo.
        if is_zero(b._numerator):
            zero = zero_of(b._numerator)
            return Rational._from_parts(zero, zero)
        return Rational(
            (a._numerator % b._numerator) * a._denominator,
            b._denominator * a._denominator,
        )

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv, reflected=True)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mod)

    def __rmod__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mod, reflected=True)

    def __neg__(self) -> "Rational":
        return Rational(zero_of(self._numerator) - self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    # ------------------------------------------------------------------
    # Comparisons
    def _ordered(self, other: Any, accept: Callable[[int], bool]) -> Any:
        if self._coerce_scalar(other) is None:
            return NotImplemented
        result = self.compare(other)
        return result is not None and accept(result)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return bool(
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: Any) -> bool:
        return self._ordered(other, lambda r: r < 0)

    def __le__(self, other: Any) -> bool:
        return self._ordered(other, lambda r: r <= 0)

    def __gt__(self, other: Any) -> bool:
        return self._ordered(other, lambda r: r > 0)

    def __ge__(self, other: Any) -> bool:
        return self._ordered(other, lambda r: r >= 0)

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._require_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._require_scalar(value))
        if has_array:
            return np.vectorize(op, otypes=[object])(*coerced)
        return op(*coerced)


# ----------------------------------------------------------------------
# Capability registrations
@zero_of.register(Rational)
def _zero_of_rational(value: Rational) -> Rational:
    return Rational._from_parts(zero_of(value.numerator), one_of(value.numerator))


@one_of.register(Rational)
def _one_of_rational(value: Rational) -> Rational:
    one = one_of(value.numerator)
    return Rational._from_parts(one, one)


@evaluate.register(Rational)
def _evaluate_rational(value: Rational, dtype: Any = DEFAULT_DTYPE) -> Any:
    return value.evaluate(dtype)


# ----------------------------------------------------------------------
# Array helpers
def as_rational_array(values: Any, *, copy: bool = True) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    Entries that are not already :class:`Rational` are lifted with
    ``Rational(item)``; ``(num, den)`` pairs need to be converted by the
    caller since NumPy would read them as an extra axis.
    """

    array = np.array(values, dtype=object) if copy else np.asarray(values, dtype=object)
    if all(isinstance(item, Rational) for item in array.flat):
        return array
    return np.vectorize(
        lambda item: item if isinstance(item, Rational) else Rational(item),
        otypes=[object],
    )(array)


def _filled(shape: Any, factory: Callable[[], Rational]) -> "np.ndarray":
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(array.shape):
        array[index] = factory()
    return array


def zeros(shape: Any, *, item_type: Callable[[int], Any] = int) -> "np.ndarray":
    """Return an object array of ``shape`` filled with ``0/1``."""
    return _filled(shape, lambda: Rational.zero(item_type))


def ones(shape: Any, *, item_type: Callable[[int], Any] = int) -> "np.ndarray":
    """Return an object array of ``shape`` filled with ``1/1``."""
    return _filled(shape, lambda: Rational.one(item_type))


def zeros_like(values: Any, *, item_type: Callable[[int], Any] = int) -> "np.ndarray":
    return zeros(np.shape(values), item_type=item_type)


def evaluate_array(values: Any, dtype: Any = DEFAULT_DTYPE) -> "np.ndarray":
    """Evaluate every entry of an object array into a ``dtype`` array."""
    array = np.asarray(values, dtype=object)
    result = np.empty(array.shape, dtype=dtype)
    for index in np.ndindex(array.shape):
        result[index] = evaluate(array[index], dtype)
    return result


__all__ = [
    "Rational",
    "as_rational_array",
    "evaluate_array",
    "ones",
    "zeros",
    "zeros_like",
]
