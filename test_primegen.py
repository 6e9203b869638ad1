import random
import unittest

from primegen import generate_strong_prime, prime_range, random_odd_candidate
from seeding import seeded_rng


def is_prime_trial(n):
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


class FixedRandom:
    """Stands in for random.Random, always drawing the same value."""

    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


class TestPrimeGenerator(unittest.TestCase):

    def test_bit_length_and_primality(self):
        rng = random.Random(1234)
        for bits in range(2, 21):
            for _ in range(5):
                p = generate_strong_prime(bits, rng)
                self.assertEqual(p.bit_length(), bits)
                self.assertTrue(is_prime_trial(p), msg=f"{p} ({bits} bits)")

    def test_15_bit_range(self):
        rng = random.Random(15)
        low, high = prime_range(15)
        self.assertEqual((low, high), (16384, 32767))
        for _ in range(50):
            p = generate_strong_prime(15, rng)
            self.assertTrue(low <= p <= high)

    def test_odd_bump_stays_in_range(self):
        """An even draw just below the top is bumped to the top, never past it."""
        for bits in range(2, 33):
            low, high = prime_range(bits)
            self.assertEqual(random_odd_candidate(bits, FixedRandom(high - 1)), high)
            self.assertEqual(random_odd_candidate(bits, FixedRandom(high)), high)
            self.assertEqual(random_odd_candidate(bits, FixedRandom(low)), low + 1)

    def test_candidates_always_odd_and_in_range(self):
        rng = random.Random(8)
        for bits in (2, 3, 8, 15, 31):
            low, high = prime_range(bits)
            for _ in range(200):
                c = random_odd_candidate(bits, rng)
                self.assertEqual(c % 2, 1)
                self.assertTrue(low <= c <= high)

    def test_same_seed_same_prime(self):
        self.assertEqual(generate_strong_prime(15, seeded_rng(77)),
                         generate_strong_prime(15, seeded_rng(77)))

    def test_default_generator(self):
        p = generate_strong_prime(12)
        self.assertEqual(p.bit_length(), 12)
        self.assertTrue(is_prime_trial(p))

    def test_too_few_bits(self):
        with self.assertRaises(ValueError):
            generate_strong_prime(1, random.Random(0))
        with self.assertRaises(ValueError):
            prime_range(0)


if __name__ == "__main__":
    unittest.main()
