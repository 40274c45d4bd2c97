"""Permutation-based key generator

Maps the shared counter value n through n -> g^n mod p, where p is a prime
smaller than the key space and g is a primitive root of p. Because g has
multiplicative order p-1, the powers g^1, g^2, ..., g^(p-1) mod p visit every
residue in [1, p-1] exactly once before repeating. Distinct counter values in
[1, p-1] therefore always yield distinct keys, with no stored state other
than the counter itself, while consecutive keys look unrelated.

Classes:
    PermutationKeyGenerator:
        Counter-backed generator with non-sequential, collision-free output.

Example:
    >>> from cloudkeygen.dao.memory import InMemoryCounterDAO
    >>> generator = PermutationKeyGenerator(
    ...     InMemoryCounterDAO(),
    ...     alphabet=Alphabet.named('base62'),
    ...     length=8,
    ...     prime=37845836980717,
    ...     primitive_root=2,
    ...     verify=False,
    ... )
    >>> generator.generate()  # 2^1 mod p
    '00000002'
    >>> generator.generate()  # 2^2 mod p
    '00000004'
    >>> generator.permute(40)
    1099511627776
"""

import logging

from cloudkeygen.dao.base import CounterBaseDAO
from cloudkeygen.exceptions import InvalidConfigurationError, KeySpaceExhaustedError
from cloudkeygen.generators.base import CounterKeyGenerator
from cloudkeygen.models import Alphabet
from cloudkeygen.utils.numbers import validate_permutation_parameters


logger = logging.getLogger(__name__)


class PermutationKeyGenerator(CounterKeyGenerator):
    """Counter-backed generator issuing g^n mod p as keys.

    Attributes:
        prime (int):
            Modulus p. Must be prime and smaller than B^L.
        primitive_root (int):
            Base g. Must be a primitive root modulo p.
        counter_start (int):
            Offset added to every counter value, n = counter + counter_start.

    NOTE:
        - The period is p-1. Once n exceeds p-1 the sequence would wrap and
          reissue old keys, so generate() raises KeySpaceExhaustedError instead.
        - n = 0 is never permuted (g^0 = 1 = g^(p-1)): counters start at 1
          and counter_start may not be negative.
        - counter_start must be below p-1 so at least one key remains.
        - With verify=False, (p, g) is a caller-supplied precondition. A
          wrong g silently yields a shorter period and colliding keys.
    """

    def __init__(
        self,
        counter: CounterBaseDAO,
        alphabet: Alphabet,
        length: int,
        prime: int,
        primitive_root: int,
        counter_start: int = 0,
        namespace: str = 'permutation',
        verify: bool = True,
    ):
        super().__init__(counter, alphabet, length, namespace)

        if prime >= self.capacity:
            raise InvalidConfigurationError(f'Prime {prime} does not fit in the key space (must be smaller than {self.capacity}).')
        if not 1 < primitive_root < prime:
            raise InvalidConfigurationError(f'Primitive root must be in (1, {prime}) (given value: {primitive_root}).')
        if counter_start < 0:
            raise InvalidConfigurationError(f'Counter start must be a non-negative integer (given value: {counter_start}).')
        if counter_start >= prime - 1:
            raise InvalidConfigurationError(f'Counter start {counter_start} leaves no keys in the permutation period {prime - 1}.')
        if verify:
            validate_permutation_parameters(prime, primitive_root, self.capacity)

        self.prime = prime
        self.primitive_root = primitive_root
        self.counter_start = counter_start

    @property
    def period(self) -> int:
        """Number of distinct keys before the sequence repeats (p-1)."""
        return self.prime - 1

    def permute(self, n: int) -> int:
        """Return g^n mod p

        Python integers are arbitrary precision, so the binary
        exponentiation in pow() never overflows however large p is.
        """
        return pow(self.primitive_root, n, self.prime)

    def generate(self) -> str:
        n = self.next_index() + self.counter_start
        if n < 1:
            raise KeySpaceExhaustedError(f'Counter value {n} is outside the permutation domain [1, {self.period}].')
        if n > self.period:
            logger.warning(
                'Permutation period exhausted.',
                extra={'namespace': self.namespace, 'counter': n, 'period': self.period},
            )
            raise KeySpaceExhaustedError(f'Counter value {n} exceeds the permutation period {self.period}; keys would repeat.')
        return self.alphabet.encode(self.permute(n), self.length)
