"""
Tests for the double-and-add / square-and-multiply primitives.
Results are checked against Python's own big-integer arithmetic.
"""

import random
import unittest

from modarith import SAFE_BITS, WORD_BITS, fits_width, mod_mul, mod_pow


class TestModMul(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(42)

    def test_matches_wide_product(self):
        """mod_mul agrees with (a*b) % n for random 32-bit operands."""
        for _ in range(500):
            n = self.rng.randint(1, (1 << WORD_BITS) - 1)
            a = self.rng.randint(0, (1 << WORD_BITS) - 1)
            b = self.rng.randint(0, (1 << WORD_BITS) - 1)
            self.assertEqual(mod_mul(a, b, n), (a * b) % n)

    def test_small_values(self):
        self.assertEqual(mod_mul(0, 12345, 97), 0)
        self.assertEqual(mod_mul(12345, 0, 97), 0)
        self.assertEqual(mod_mul(7, 8, 5), 1)
        self.assertEqual(mod_mul(123, 456, 1), 0)

    def test_word_sized_extremes(self):
        top = (1 << WORD_BITS) - 1
        self.assertEqual(mod_mul(top, top, top - 2), (top * top) % (top - 2))

    def test_non_positive_modulus(self):
        with self.assertRaises(ValueError):
            mod_mul(3, 4, 0)
        with self.assertRaises(ValueError):
            mod_mul(3, 4, -5)


class TestModPow(unittest.TestCase):

    def test_matches_builtin_pow(self):
        rng = random.Random(7)
        for _ in range(300):
            n = rng.randint(1, (1 << 30))
            base = rng.randint(0, (1 << WORD_BITS) - 1)
            exponent = rng.randint(0, 1 << 20)
            self.assertEqual(mod_pow(base, exponent, n), pow(base, exponent, n))

    def test_zero_exponent(self):
        """a^0 is 1 mod n, which is 0 when n == 1."""
        for n in (2, 3, 97, 65537):
            self.assertEqual(mod_pow(12345, 0, n), 1)
        self.assertEqual(mod_pow(12345, 0, 1), 0)
        self.assertEqual(mod_pow(0, 0, 5), 1)

    def test_base_is_reduced(self):
        self.assertEqual(mod_pow(100 + 13, 5, 100), pow(13, 5, 100))

    def test_textbook_example(self):
        # n = 119, e = 5, d = 77
        c = mod_pow(19, 5, 119)
        self.assertEqual(c, 66)
        self.assertEqual(mod_pow(c, 77, 119), 19)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            mod_pow(2, 3, 0)
        with self.assertRaises(ValueError):
            mod_pow(2, -1, 7)


class TestFitsWidth(unittest.TestCase):

    def test_boundaries(self):
        self.assertTrue(fits_width(0))
        self.assertTrue(fits_width((1 << SAFE_BITS) - 1))
        self.assertFalse(fits_width(1 << SAFE_BITS))
        self.assertTrue(fits_width((1 << WORD_BITS) - 1, WORD_BITS))
        self.assertFalse(fits_width(-1))


if __name__ == "__main__":
    unittest.main()
