"""Number theory helpers for the permutation key generator

The permutation generator maps a counter value n to g^n mod p. The mapping is
collision-free for n in [1, p-1] only if p is prime and g is a primitive root
of p (i.e. the multiplicative order of g is exactly p-1). These helpers check
those preconditions and help pick suitable parameters for a key space.

Functions:
    is_prime(n) -> bool
        Miller-Rabin primality test (deterministic below 3.3e24).
    prime_factors(n) -> set[int]
        Distinct prime factors of n (trial division + Pollard's rho).
    is_primitive_root(g, p) -> bool
        True if g generates the whole multiplicative group modulo prime p.
    smallest_primitive_root(p) -> int
        Smallest primitive root of prime p.
    largest_prime_below(n) -> int
        Largest prime strictly smaller than n.
    validate_permutation_parameters(prime, primitive_root, capacity) -> None
        Raise InvalidConfigurationError unless (p, g) is a full-period pair
        fitting in the key space.

Example:
    >>> is_prime(23)
    True
    >>> prime_factors(22)
    {2, 11}
    >>> is_primitive_root(5, 23)
    True
    >>> is_primitive_root(2, 23)
    False
    >>> largest_prime_below(62**2)
    3833
"""

import math
import random

from cloudkeygen.exceptions import InvalidConfigurationError


# Testing against all of these bases is exact for n < 3.3 * 10**24
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
_DETERMINISTIC_LIMIT = 3_317_044_064_679_887_385_961_981
_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def is_prime(n: int) -> bool:
    """Check primality with the Miller-Rabin test

    Deterministic for n < 3.3 * 10**24 (well beyond any practical key space);
    above that, adds random witnesses and errs with probability < 4**-32.
    """
    if n < 2:
        return False
    for q in _SMALL_PRIMES:
        if n % q == 0:
            return n == q

    # n - 1 = d * 2^s with d odd
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    witnesses = list(_WITNESSES)
    if n >= _DETERMINISTIC_LIMIT:
        witnesses += [random.randrange(2, n - 1) for _ in range(32)]  # noqa: S311

    for a in witnesses:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def _pollard_brent(n: int) -> int:
    """Return a non-trivial factor of the odd composite n."""
    while True:
        y, c, m = random.randrange(1, n), random.randrange(1, n), 128  # noqa: S311
        g = r = q = 1
        x = ys = y
        while g == 1:
            x = y
            for _ in range(r):
                y = (y * y + c) % n
            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(m, r - k)):
                    y = (y * y + c) % n
                    q = q * abs(x - y) % n
                g = math.gcd(q, n)
                k += m
            r *= 2
        if g == n:
            # Batched gcd overshot, backtrack one step at a time
            g = 1
            while g == 1:
                ys = (ys * ys + c) % n
                g = math.gcd(abs(x - ys), n)
        if g != n:
            return g


def prime_factors(n: int) -> set[int]:
    """Return the distinct prime factors of n (n >= 1)

    Example:
        >>> prime_factors(2**67 - 1)
        {193707721, 761838257287}
    """
    if n < 1:
        raise ValueError(f'Can only factor positive integers (given value: {n}).')

    factors: set[int] = set()
    for q in _SMALL_PRIMES:
        if n % q == 0:
            factors.add(q)
            while n % q == 0:
                n //= q

    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if is_prime(m):
            factors.add(m)
            continue
        d = _pollard_brent(m)
        pending.extend((d, m // d))
    return factors


def is_primitive_root(g: int, p: int) -> bool:
    """Check whether g has multiplicative order p-1 modulo the prime p

    g is a primitive root iff g^((p-1)/q) != 1 (mod p) for every prime
    factor q of p-1. The caller is responsible for p being prime.
    """
    if p < 2 or g % p == 0:
        return False
    if p == 2:
        return g % p == 1
    order = p - 1
    return all(pow(g, order // q, p) != 1 for q in prime_factors(order))


def smallest_primitive_root(p: int) -> int:
    """Return the smallest primitive root of the prime p."""
    if not is_prime(p):
        raise ValueError(f'{p} is not prime.')
    g = 1
    while not is_primitive_root(g, p):
        g += 1
    return g


def largest_prime_below(n: int) -> int:
    """Return the largest prime strictly smaller than n (n > 2)."""
    if n <= 2:
        raise ValueError(f'There is no prime below {n}.')
    candidate = n - 1
    while not is_prime(candidate):
        candidate -= 1
    return candidate


def validate_permutation_parameters(prime: int, primitive_root: int, capacity: int) -> None:
    """Ensure (prime, primitive_root) yields a full-period permutation within the key space

    Args:
        prime (int):
            Permutation modulus p.
        primitive_root (int):
            Permutation base g.
        capacity (int):
            Number of representable keys (B^L).

    Raises:
        InvalidConfigurationError:
            If p >= capacity, p is not prime or g is not a primitive root of p.
    """
    if prime >= capacity:
        raise InvalidConfigurationError(f'Prime {prime} does not fit in the key space (must be smaller than {capacity}).')
    if not is_prime(prime):
        raise InvalidConfigurationError(f'Permutation modulus {prime} is not prime.')
    if not is_primitive_root(primitive_root, prime):
        raise InvalidConfigurationError(f'{primitive_root} is not a primitive root modulo {prime}.')
