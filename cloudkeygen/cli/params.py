"""
Check or suggest permutation parameters for a key space.

The permutation generator needs a prime p smaller than B^L and a primitive
root g of p. A wrong pair doesn't fail at runtime, it silently produces a
short cycle and duplicate keys, so pairs should be checked before deployment.

CLI usage:
    $ cloudkeygen-params check --prime 37845836980717 --root 2
    $ cloudkeygen-params check --prime 1000003 --root 2 --alphabet base56 --length 6
    $ cloudkeygen-params suggest --alphabet base62 --length 8

Behavior:
    - `check` prints every verified condition and exits with status 1 on the
      first violation.
    - `suggest` prints the largest prime below B^L and its smallest primitive
      root, ready to be exported as GENERATOR_PRIME / GENERATOR_PRIME_PRIMITIVE.
"""

from __future__ import annotations

import sys
import argparse

from cloudkeygen.constants import Defaults
from cloudkeygen.exceptions import InvalidConfigurationError
from cloudkeygen.models import Alphabet
from cloudkeygen.utils.numbers import largest_prime_below, smallest_primitive_root, validate_permutation_parameters


def _add_key_space_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--alphabet",
        default=Defaults.ALPHABET,
        help="Alphabet name (base62, base56) or custom symbols (default: base62)",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=Defaults.KEY_LENGTH,
        help="Key length L (default: 8)",
    )


def check(args: argparse.Namespace) -> int:
    alphabet = Alphabet.named(args.alphabet)
    capacity = alphabet.capacity(args.length)
    print(f"Key space: {alphabet.base}^{args.length} = {capacity}")

    try:
        validate_permutation_parameters(args.prime, args.root, capacity)
    except InvalidConfigurationError as e:
        print(f"INVALID: {e}")
        return 1

    print(f"OK: {args.prime} is prime, {args.root} is a primitive root, period {args.prime - 1}")
    return 0


def suggest(args: argparse.Namespace) -> int:
    alphabet = Alphabet.named(args.alphabet)
    capacity = alphabet.capacity(args.length)
    prime = largest_prime_below(capacity)
    root = smallest_primitive_root(prime)

    print(f"Key space: {alphabet.base}^{args.length} = {capacity}")
    print(f"GENERATOR_PRIME={prime}")
    print(f"GENERATOR_PRIME_PRIMITIVE={root}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        int: process exit status.
    """
    parser = argparse.ArgumentParser(
        prog="cloudkeygen-params",
        description="Check or suggest (prime, primitive root) pairs for the permutation key generator",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Verify a (prime, primitive root) pair")
    check_parser.add_argument("--prime", type=int, required=True, help="Permutation modulus p")
    check_parser.add_argument("--root", type=int, required=True, help="Primitive root g of p")
    _add_key_space_arguments(check_parser)
    check_parser.set_defaults(func=check)

    suggest_parser = subparsers.add_parser("suggest", help="Find the largest usable prime and its smallest primitive root")
    _add_key_space_arguments(suggest_parser)
    suggest_parser.set_defaults(func=suggest)

    args = parser.parse_args(argv)
    if args.length < 1:
        parser.error("--length must be a positive integer")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
