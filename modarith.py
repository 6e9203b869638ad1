# modarith.py — modular multiply / exponentiate over a simulated machine word
# Both routines only ever add or double values already reduced mod n, so the
# working values stay below 2n, which is what keeps a 32-bit word from overflowing.

WORD_BITS = 32        # unsigned machine word being modelled
SAFE_BITS = 31        # values with bit 31 set are unsafe for signed arithmetic


def fits_width(value, bits=SAFE_BITS):
    """True if 0 <= value < 2^bits."""
    return 0 <= value < (1 << bits)


def mod_mul(a, b, n):
    """
    Double-and-add modular multiplication: returns (a * b) mod n.

    Walks the bits of b from LSB to MSB, adding the running double of a
    whenever the bit is set. No intermediate exceeds 2n.
    """
    if n <= 0:
        raise ValueError("modulus must be positive")

    r = 0
    a %= n
    while b > 0:
        if b & 1:
            r = (r + a) % n
        a = (a << 1) % n
        b >>= 1
    return r


def mod_pow(base, exponent, n):
    """
    Square-and-multiply modular exponentiation: returns base^exponent mod n.

    Every product goes through mod_mul. exponent == 0 gives 1 mod n,
    so a modulus of 1 yields 0.
    """
    if n <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("Negative exponents not supported.")

    r = 1 % n
    base %= n
    while exponent > 0:
        if exponent & 1:
            r = mod_mul(r, base, n)      # multiply when bit is 1
        base = mod_mul(base, base, n)    # square every iteration
        exponent >>= 1
    return r
