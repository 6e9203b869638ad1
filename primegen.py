"""
Random prime generation for a fixed bit length.

"Strong" here only means the prime has exactly the requested number of
bits; no structure is imposed on p - 1 or p + 1.
"""

import logging

from primality import DEFAULT_ROUNDS, is_probable_prime
from seeding import seeded_rng

log = logging.getLogger(__name__)


def prime_range(bits):
    """Inclusive bounds (2^(bits-1), 2^bits - 1) of a `bits`-bit integer."""
    if bits < 2:
        raise ValueError("bits must be at least 2")
    return 1 << (bits - 1), (1 << bits) - 1


def random_odd_candidate(bits, rng):
    """
    Uniform draw from the `bits`-bit range, bumped to odd when even.

    The upper bound 2^bits - 1 is itself odd, so an even draw is at most
    2^bits - 2 and the bump never leaves the range.
    """
    low, high = prime_range(bits)
    candidate = rng.randint(low, high)
    if candidate % 2 == 0:
        candidate += 1
    return candidate


def generate_strong_prime(bits, rng=None, rounds=DEFAULT_ROUNDS):
    """
    Draw odd candidates until one passes Miller-Rabin.

    Args:
        bits (int): Exact bit length of the prime (>= 2)
        rng (random.Random): Generator handle; a freshly seeded one if None
        rounds (int): Miller-Rabin rounds per candidate

    Returns:
        int: A probable prime in [2^(bits-1), 2^bits - 1]
    """
    if rng is None:
        rng = seeded_rng()

    rejected = 0
    while True:
        candidate = random_odd_candidate(bits, rng)
        if is_probable_prime(candidate, rounds, rng):
            log.debug("found %d-bit prime %d after %d rejected candidates",
                      bits, candidate, rejected)
            return candidate
        rejected += 1
