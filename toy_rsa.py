"""
Textbook RSA encryption/decryption over a small keypair.

No padding is applied: the message is an integer in [0, n) and is
exponentiated directly with mod_pow.
"""

from modarith import mod_pow


class ToyRSA:
    """RSA implementation using double-and-add modular arithmetic."""

    def __init__(self, n, e, d=None):
        """
        Initialize RSA with given keys.

        Args:
            n (int): RSA modulus
            e (int): Public exponent
            d (int): Private exponent (optional, needed for decryption)
        """
        if n <= 1:
            raise ValueError("Modulus n must be greater than 1")
        self.n = n
        self.e = e
        self.d = d

    @classmethod
    def from_keypair(cls, keypair):
        return cls(keypair.n, keypair.e, keypair.d)

    def encrypt(self, message):
        """
        Encrypt a message using RSA.

        Args:
            message (int): Message to encrypt (must be in [0, n))

        Returns:
            int: Encrypted message (ciphertext)
        """
        if not 0 <= message < self.n:
            raise ValueError("Message must be in [0, n)")

        return mod_pow(message, self.e, self.n)

    def decrypt(self, ciphertext):
        """
        Decrypt a ciphertext using RSA.

        Args:
            ciphertext (int): Ciphertext to decrypt

        Returns:
            int: Decrypted message (plaintext)
        """
        if self.d is None:
            raise ValueError("Private key (d) not provided for decryption")

        if not 0 <= ciphertext < self.n:
            raise ValueError("Ciphertext must be in [0, n)")

        return mod_pow(ciphertext, self.d, self.n)


def encrypt(message, public_key):
    """c = m^e mod n for public_key = (n, e)."""
    n, e = public_key
    return ToyRSA(n, e).encrypt(message)


def decrypt(ciphertext, private_key):
    """m = c^d mod n for private_key = (n, d)."""
    n, d = private_key
    return ToyRSA(n, None, d).decrypt(ciphertext)
