#!/usr/bin/env python3
"""
Small RSA demo: generate a keypair from two tiny primes, round-trip a
message through encryption and decryption, then break the modulus with
Fermat's factorization.

Usage:
  python3 rsa_demo.py
  python3 rsa_demo.py --bits 15 -e 65537 --message 100 --seed 1234
  python3 rsa_demo.py --max-steps 100000 --verbosity DEBUG
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from fermat import FactorizationTimeout, fermat_factor_with_steps
from keygen import DEFAULT_BITS, DEFAULT_E, Keypair, generate_keypair
from primality import DEFAULT_ROUNDS
from seeding import seeded_rng
from toy_rsa import ToyRSA

DEFAULT_MESSAGE = 100

log = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    bits: int = DEFAULT_BITS
    e: int = DEFAULT_E
    rounds: int = DEFAULT_ROUNDS
    message: int = DEFAULT_MESSAGE
    seed: Optional[int] = None
    max_steps: Optional[int] = None     # Fermat step cap, None = unbounded

    def validate(self):
        if self.bits < 3:
            raise ValueError("bits must be at least 3")
        if self.rounds < 1:
            raise ValueError("rounds must be at least 1")
        if self.e < 3 or self.e % 2 == 0:
            raise ValueError("e must be odd and at least 3")
        if self.message < 0:
            raise ValueError("message must be non-negative")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError("max_steps must be non-negative")


@dataclass
class DemoReport:
    keypair: Keypair
    message: int
    ciphertext: int
    decrypted: int
    factors: tuple
    fermat_steps: int

    @property
    def round_trip_ok(self):
        return self.decrypted == self.message

    @property
    def factored_ok(self):
        return set(self.factors) == {self.keypair.p, self.keypair.q}


def run_demo(config, rng=None):
    """Key generation, encrypt/decrypt round trip, Fermat attack."""
    config.validate()
    if rng is None:
        rng = seeded_rng(config.seed)

    keypair = generate_keypair(config.bits, config.e, rng, config.rounds)

    rsa = ToyRSA.from_keypair(keypair)
    ciphertext = rsa.encrypt(config.message)
    decrypted = rsa.decrypt(ciphertext)

    p, q, steps = fermat_factor_with_steps(keypair.n, config.max_steps)
    log.info("Fermat attack recovered %d * %d in %d steps", p, q, steps)

    return DemoReport(
        keypair=keypair,
        message=config.message,
        ciphertext=ciphertext,
        decrypted=decrypted,
        factors=(p, q),
        fermat_steps=steps,
    )


def print_report(report, out=None):
    if out is None:
        out = sys.stdout
    k = report.keypair
    print(f"Primes (p,q): {k.p} {k.q}", file=out)
    print(f"Public Key (n,e): {k.n} {k.e}", file=out)
    print(f"Private Key d: {k.d}", file=out)
    print(f"phi too large: {int(k.phi_too_large)}", file=out)
    print(f"Ciphertext: {report.ciphertext}", file=out)
    print(f"Decrypted: {report.decrypted}", file=out)
    print(f"p and q: {report.factors[0]} {report.factors[1]}", file=out)


def parse_value(value_str):
    """Parse a value string as decimal or hexadecimal."""
    if value_str.lower().startswith('0x'):
        return int(value_str, 16)
    else:
        return int(value_str)


def build_parser():
    p = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=__doc__,
    )
    p.add_argument("--bits", type=parse_value, default=DEFAULT_BITS, help="bit length of each prime")
    p.add_argument("-e", type=parse_value, default=DEFAULT_E, help="public exponent")
    p.add_argument("--rounds", type=parse_value, default=DEFAULT_ROUNDS, help="Miller-Rabin rounds")
    p.add_argument("--message", type=parse_value, default=DEFAULT_MESSAGE, help="plaintext integer, must be < n")
    p.add_argument("--seed", type=parse_value, default=None, help="seed for a reproducible run")
    p.add_argument("--max-steps", type=parse_value, default=None, help="give up the Fermat attack after this many steps")
    p.add_argument("--verbosity", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.verbosity), format="%(message)s")

    config = DemoConfig(
        bits=args.bits,
        e=args.e,
        rounds=args.rounds,
        message=args.message,
        seed=args.seed,
        max_steps=args.max_steps,
    )
    try:
        report = run_demo(config)
    except FactorizationTimeout as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2
    except ValueError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    print_report(report)
    return 0 if report.round_trip_ok and report.factored_ok else 1


if __name__ == "__main__":
    sys.exit(main())
