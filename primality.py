"""
Miller-Rabin probable prime test.

A False answer is definite (n is composite). A True answer is wrong with
probability at most 4^-rounds.
"""

import logging

from modarith import mod_mul, mod_pow
from seeding import seeded_rng

DEFAULT_ROUNDS = 20

log = logging.getLogger(__name__)


def decompose(n):
    """Write n - 1 as 2^s * d with d odd. Returns (s, d)."""
    s = 0
    d = n - 1
    while (d & 1) == 0:
        s += 1
        d >>= 1
    return s, d


def is_probable_prime(n, rounds=DEFAULT_ROUNDS, rng=None):
    """
    Miller-Rabin test with `rounds` random witnesses drawn from rng.

    Args:
        n (int): Candidate
        rounds (int): Number of witnesses to try
        rng (random.Random): Source of witnesses; a freshly seeded one if None

    Returns:
        bool: False if n is composite, True if n is probably prime
    """
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    if rng is None:
        rng = seeded_rng()

    s, d = decompose(n)

    for _ in range(rounds):
        a = rng.randint(2, n - 2)
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue

        # look for n-1 among the next s-1 squarings
        for _ in range(s - 1):
            x = mod_mul(x, x, n)
            if x == n - 1:
                break
        else:
            log.debug("witness %d proves %d composite", a, n)
            return False

    return True
