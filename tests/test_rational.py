import unittest

import numpy as np

from rationals import (
    Rational,
    as_rational_array,
    evaluate,
    evaluate_array,
    ones,
    zeros,
    zeros_like,
)


class ConstructionTests(unittest.TestCase):
    def test_reduces_to_lowest_terms(self):
        self.assertEqual(Rational(1, 2), Rational(4, 8))
        self.assertEqual(Rational(1, 2), Rational(-1, -2))
        self.assertEqual(Rational(10, 20).as_tuple(), (1, 2))

    def test_gcd_sign_follows_denominator(self):
        value = Rational(3, -6)
        self.assertEqual(value.numerator, -1)
        self.assertEqual(value.denominator, 2)

    def test_zero_numerator_collapses(self):
        self.assertEqual(Rational(0, 4), Rational(0, 1))
        self.assertEqual(Rational(0, -7), Rational.zero())
        self.assertEqual(Rational(0, 4).as_tuple(), (0, 1))

    def test_zero_denominator_is_undefined(self):
        self.assertEqual(Rational(3, 0), Rational(0, 0))
        self.assertEqual(Rational(3, 0).as_tuple(), (0, 0))
        self.assertTrue(Rational(3, 0).is_undefined())
        self.assertFalse(Rational(0, 0).is_zero())

    def test_bare_item_and_pair(self):
        self.assertEqual(Rational(5).as_tuple(), (5, 1))
        self.assertEqual(Rational((6, 8)), Rational(3, 4))
        with self.assertRaises(TypeError):
            Rational((1, 2, 3))

    def test_numpy_integer_items(self):
        value = Rational(np.int64(2), np.int64(4))
        self.assertEqual(value, Rational(np.int64(1), np.int64(2)))
        self.assertIsInstance(value.numerator, np.int64)
        self.assertIsInstance(value.denominator, np.int64)

    def test_hash_matches_equality(self):
        self.assertEqual(len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}), 1)


class IdentityTests(unittest.TestCase):
    def test_zero_and_one(self):
        self.assertTrue(Rational.zero().is_zero())
        self.assertTrue(Rational.one().is_one())
        self.assertTrue(Rational(3, 3).is_one())
        self.assertFalse(Rational(2, 3).is_one())
        self.assertFalse(Rational(2, 3).is_zero())

    def test_truthiness(self):
        self.assertFalse(Rational(0, 5))
        self.assertTrue(Rational(0, 0))
        self.assertTrue(Rational(1, 5))

    def test_inverse(self):
        self.assertEqual(Rational(2, 3).inverse().as_tuple(), (3, 2))
        self.assertEqual(Rational(0, 0).inverse().as_tuple(), (0, 0))


class ArithmeticTests(unittest.TestCase):
    def test_add(self):
        self.assertEqual(Rational(1, 2) + Rational(3, 4), Rational(5, 4))

    def test_sub(self):
        self.assertEqual(Rational(3, 5) - Rational(2, 5), Rational(1, 5))
        self.assertEqual(Rational(1, 0) - Rational(3, 2), Rational(0, 0))

    def test_mul(self):
        self.assertEqual(Rational(1, 2) * Rational(3, 4), Rational(3, 8))

    def test_div(self):
        self.assertEqual(Rational(1, 2) / Rational(1, 2), Rational(1, 1))
        self.assertEqual(Rational(0, 1) / Rational(1, 0), Rational(0, 0))
        self.assertEqual(Rational(3, 4) / Rational(0, 1), Rational(0, 0))

    def test_undefined_propagates(self):
        undefined = Rational(1, 2) / Rational.zero()
        result = (undefined + Rational(1, 3)) * Rational(5, 7) - Rational(1, 9)
        self.assertTrue(result.is_undefined())

    def test_remainder_keeps_literal_formula(self):
        self.assertEqual(Rational(7, 2) % Rational(3, 1), Rational(1, 1))
        self.assertEqual(Rational(5, 3) % Rational(2, 7), Rational(1, 7))
        self.assertEqual(Rational(1, 2) % Rational(1, 3), Rational.zero())

    def test_remainder_by_zero_is_undefined(self):
        self.assertTrue((Rational(1, 2) % Rational(0, 1)).is_undefined())
        self.assertTrue((Rational(1, 2) % Rational(0, 0)).is_undefined())

    def test_negation(self):
        self.assertEqual(-Rational(1, 2), Rational(-1, 2))
        self.assertTrue((-Rational(0, 0)).is_undefined())
        value = Rational(1, 2)
        self.assertIs(+value, value)

    def test_bare_integers_are_lifted(self):
        self.assertEqual(Rational(1, 2) + 1, Rational(3, 2))
        self.assertEqual(1 - Rational(1, 3), Rational(2, 3))
        self.assertEqual(2 / Rational(4, 1), Rational(1, 2))
        self.assertEqual(3 * Rational(1, 6), Rational(1, 2))

    def test_floats_are_rejected(self):
        with self.assertRaises(TypeError):
            _ = Rational(1, 2) + 0.5


class ComparisonTests(unittest.TestCase):
    def test_ordering(self):
        self.assertTrue(Rational(1, 2) < Rational(3, 4))
        self.assertTrue(Rational(3, 4) > Rational(1, 2))
        self.assertTrue(Rational(1, 2) <= Rational(2, 4))
        self.assertTrue(Rational(-1, 2) < Rational(0, 1))
        self.assertEqual(Rational(1, 2).compare(Rational(2, 4)), 0)

    def test_zero_numerator_is_incomparable(self):
        self.assertIsNone(Rational(0, 1).compare(Rational(1, 2)))
        self.assertIsNone(Rational(0, 0).compare(Rational(1, 2)))
        self.assertFalse(Rational(0, 1) < Rational(1, 2))
        self.assertFalse(Rational(0, 1) > Rational(1, 2))

    def test_ordering_only_inspects_left_operand(self):
        self.assertTrue(Rational(1, 2) > Rational(0, 1))
        self.assertFalse(Rational(0, 1) < Rational(1, 2))


class EvaluationTests(unittest.TestCase):
    def test_evaluate_half(self):
        self.assertEqual(Rational(1, 2).evaluate(), 0.5)
        self.assertIsInstance(Rational(1, 2).evaluate(), np.float64)
        self.assertIsInstance(Rational(1, 2).evaluate(np.float32), np.float32)
        self.assertEqual(evaluate(Rational(1, 4), np.float32), np.float32(0.25))
        self.assertEqual(float(Rational(3, 4)), 0.75)

    def test_undefined_evaluates_to_nan(self):
        self.assertTrue(np.isnan(Rational(0, 0).evaluate()))


class ParsingTests(unittest.TestCase):
    def test_from_str_radix(self):
        self.assertEqual(Rational.from_str_radix("2/3", 10), Rational(2, 3))
        self.assertEqual(Rational.from_str_radix("10/12", 16), Rational(0x10, 0x12))
        self.assertEqual(Rational.from_str("4:6"), Rational(2, 3))

    def test_numpy_item_type(self):
        value = Rational.from_str_radix("101/11", 2, item_type=np.int32)
        self.assertEqual(value, Rational(np.int32(5), np.int32(3)))
        self.assertIsInstance(value.numerator, np.int32)

    def test_missing_denominator(self):
        with self.assertRaisesRegex(ValueError, "missing denominator"):
            Rational.from_str("7")

    def test_item_errors_propagate(self):
        with self.assertRaises(ValueError):
            Rational.from_str("1/x")
        with self.assertRaises(ValueError):
            Rational.from_str("1/2/3")

    def test_display_round_trip(self):
        for value in (Rational(3, 7), Rational(-5, 4), Rational(0, 9), Rational(2, 0), Rational(12, -8)):
            self.assertEqual(Rational.from_str(str(value)), value)

    def test_formatting(self):
        value = Rational(3, 2)
        self.assertEqual(str(value), "3/2")
        self.assertEqual(repr(value), "Rational(3, 2)")
        self.assertEqual(f"{value}", "3/2")
        self.assertEqual(f"{value:r}", "3/2")
        self.assertEqual(f"{value:.2f}", "1.50")


class ArrayTests(unittest.TestCase):
    def test_vector_addition(self):
        vec = as_rational_array([Rational(1, 2), Rational(2, 3), Rational(3, 4)])
        q = as_rational_array([Rational(3, 5), Rational(1, 2), 0])
        result = vec + q
        self.assertEqual(result.dtype, object)
        self.assertEqual(list(result), [Rational(11, 10), Rational(7, 6), Rational(3, 4)])

    def test_scalar_broadcasting(self):
        vec = as_rational_array([Rational(1, 2), Rational(1, 3)])
        shifted = Rational(1, 6) + vec
        self.assertEqual(list(shifted), [Rational(2, 3), Rational(1, 2)])

        scaled = vec * Rational(2, 1)
        self.assertIsInstance(scaled, np.ndarray)
        self.assertEqual(list(scaled), [Rational(1, 1), Rational(2, 3)])

        diff = Rational(1, 1) - vec
        self.assertEqual(list(diff), [Rational(1, 2), Rational(2, 3)])

    def test_ufunc_support(self):
        vec = as_rational_array([Rational(1, 2), Rational(3, 4)])
        result = np.add(vec, Rational(1, 4))
        self.assertEqual(list(result), [Rational(3, 4), Rational(1, 1)])

    def test_matrix_vector_product(self):
        mat = as_rational_array([[Rational(1, 2), Rational(1, 3)], [Rational(0), Rational(1)]])
        vec = as_rational_array([Rational(1), Rational(2)])
        product = mat @ vec
        self.assertEqual(list(product), [Rational(7, 6), Rational(2, 1)])
        np.testing.assert_allclose(evaluate_array(product), [7 / 6, 2.0])

    def test_helpers(self):
        arr = zeros((2, 3))
        self.assertEqual(arr.shape, (2, 3))
        self.assertTrue(all(item.is_zero() for item in arr.flat))
        self.assertTrue(all(item.is_one() for item in ones(3)))

        like = zeros_like(as_rational_array([1, 2, 3]))
        self.assertEqual(like.shape, (3,))
        np.testing.assert_array_equal(evaluate_array(like, np.float32), np.zeros(3, dtype=np.float32))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
