"""Exact rational numbers over generic item types."""

from .complex import Complex, complex_of_rational, rational_of_complex
from .rational import (
    Rational,
    as_rational_array,
    evaluate_array,
    ones,
    zeros,
    zeros_like,
)
from .traits import (
    DEFAULT_DTYPE,
    DEFAULT_RADIX,
    RationalItem,
    evaluate,
    gcd,
    one_of,
    parse_item,
    zero_of,
)

__all__ = [
    "Complex",
    "DEFAULT_DTYPE",
    "DEFAULT_RADIX",
    "Rational",
    "RationalItem",
    "as_rational_array",
    "complex_of_rational",
    "evaluate",
    "evaluate_array",
    "gcd",
    "one_of",
    "ones",
    "parse_item",
    "rational_of_complex",
    "zero_of",
    "zeros",
    "zeros_like",
]
