"""
RSA key generation from two small random primes.

Prime pairs are redrawn until p != q and e is invertible mod phi, so on
return e*d == 1 (mod phi) always holds.
"""

import logging
from dataclasses import dataclass

from euclid import NotCoprime, mod_inverse
from modarith import SAFE_BITS, fits_width
from primality import DEFAULT_ROUNDS
from primegen import generate_strong_prime
from seeding import seeded_rng

DEFAULT_BITS = 15
DEFAULT_E = 65537

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keypair:
    """
    RSA key material.

    n, e = public key
    d    = private exponent
    p, q = secret primes, phi = (p-1)(q-1)
    attempts = prime pairs drawn before this one was accepted
    """
    p: int
    q: int
    n: int
    e: int
    d: int
    phi: int
    attempts: int = 1

    @property
    def public_key(self):
        return self.n, self.e

    @property
    def private_key(self):
        return self.n, self.d

    @property
    def phi_too_large(self):
        """True if phi does not fit the signed-safe machine width."""
        return not fits_width(self.phi, SAFE_BITS)

    @property
    def n_too_large(self):
        return not fits_width(self.n, SAFE_BITS)


def generate_keypair(bits=DEFAULT_BITS, e=DEFAULT_E, rng=None, rounds=DEFAULT_ROUNDS):
    """
    Generate an RSA keypair from two distinct `bits`-bit primes.

    Args:
        bits (int): Bit length of each prime
        e (int): Public exponent
        rng (random.Random): Generator handle; a freshly seeded one if None
        rounds (int): Miller-Rabin rounds per prime candidate

    Returns:
        Keypair: with p != q and (e * d) % phi == 1
    """
    if e < 3 or e % 2 == 0:
        raise ValueError("public exponent must be odd and at least 3")
    if rng is None:
        rng = seeded_rng()

    attempts = 0
    while True:
        attempts += 1
        p = generate_strong_prime(bits, rng, rounds)
        q = generate_strong_prime(bits, rng, rounds)
        if p == q:
            log.debug("duplicate primes p = q = %d, redrawing both", p)
            continue

        n = p * q
        phi = (p - 1) * (q - 1)
        try:
            d = mod_inverse(e, phi)
        except NotCoprime as ex:
            log.debug("discarding p=%d q=%d: %s", p, q, ex)
            continue

        keypair = Keypair(p=p, q=q, n=n, e=e, d=d, phi=phi, attempts=attempts)
        if keypair.phi_too_large:
            log.warning("phi = %d exceeds %d bits", phi, SAFE_BITS)
        log.info("generated keypair n=%d after %d attempt(s)", n, attempts)
        return keypair
