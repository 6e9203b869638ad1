# fermat.py — Fermat difference-of-squares factoring
# Looks for a, b with a^2 - b^2 = n, so n = (a - b)(a + b). The number of
# steps grows with |p - q|, which is why close primes fall almost instantly.

import logging
import math

log = logging.getLogger(__name__)


class FactorizationTimeout(RuntimeError):
    """Raised when the step cap runs out before a factorization is found."""

    def __init__(self, n, steps):
        super().__init__(f"no factorization of {n} within {steps} steps")
        self.n = n
        self.steps = steps


def fermat_factor_with_steps(n, max_steps=None):
    """
    Factor n by Fermat's method.

    Args:
        n (int): Odd composite with two factors of similar size
        max_steps (int): Give up after this many steps; None never gives up

    Returns:
        tuple: (p, q, steps) with p <= q and p * q == n

    Raises:
        FactorizationTimeout: if max_steps is reached
    """
    if n < 1:
        raise ValueError("n must be positive")

    a = math.isqrt(n)
    if a * a < n:
        a += 1                  # a = ceil(sqrt(n))
    b = 0
    b_squared = 0
    k = a * a - n               # b^2 we are looking for
    steps = 0

    while k != b_squared:
        if max_steps is not None and steps >= max_steps:
            raise FactorizationTimeout(n, steps)
        if b_squared > k:
            k += 2 * a + 1      # (a+1)^2 - n
            a += 1
        else:
            b_squared += 2 * b + 1
            b += 1
        steps += 1

    log.debug("factored %d in %d steps (a=%d, b=%d)", n, steps, a, b)
    return a - b, a + b, steps


def fermat_factor(n, max_steps=None):
    """Return (p, q) with p <= q and p * q == n."""
    p, q, _ = fermat_factor_with_steps(n, max_steps)
    return p, q
