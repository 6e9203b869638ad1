# seeding.py — the single pseudorandom generator handle threaded through prime
# generation and Miller-Rabin. Pass a seed for reproducible runs.

import os
import random
import time


def entropy_seed():
    """OS entropy mixed with a monotonic clock reading."""
    return int.from_bytes(os.urandom(8), "big") ^ time.monotonic_ns()


def seeded_rng(seed=None):
    """Return a random.Random seeded with `seed`, or with entropy_seed() if None."""
    if seed is None:
        seed = entropy_seed()
    return random.Random(seed)
