"""
Extended Euclidean algorithm and modular inverse.

Used by key generation to derive the private exponent d = e^(-1) mod phi.
"""


class NotCoprime(ValueError):
    """Raised when an inverse is requested for values sharing a factor."""

    def __init__(self, a, m, gcd):
        super().__init__(f"{a} has no inverse mod {m} (gcd = {gcd})")
        self.a = a
        self.m = m
        self.gcd = gcd


def extended_gcd(a, b):
    """
    Iterative extended GCD.

    Returns:
        tuple: (g, x, y) with a*x + b*y == g == gcd(a, b). For b == 0 this
        is (a, 1, 0). x and y may be negative.
    """
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inverse(e, phi):
    """
    Modular inverse of e modulo phi.

    Args:
        e (int): Value to invert (the public exponent)
        phi (int): Modulus (the totient), must be positive

    Returns:
        int: d in [0, phi) with (e * d) % phi == 1 % phi

    Raises:
        NotCoprime: if gcd(e, phi) != 1
    """
    if phi <= 0:
        raise ValueError("modulus must be positive")

    g, x, _ = extended_gcd(e, phi)
    if g != 1:
        raise NotCoprime(e, phi, g)
    return x % phi
