"""Abstract base classes for key generators.

A key generator issues fixed-length keys over an alphabet. Exactly one
generator is built per process, at startup, and shared by every caller.

Classes:
    KeyGenerator:
        Interface with a single `generate()` operation.
    CounterKeyGenerator:
        Base for generators indexed by a shared atomic counter.

Example:
    >>> from cloudkeygen.dao.memory import InMemoryCounterDAO
    >>> from cloudkeygen.generators import SequentialKeyGenerator
    >>> generator = SequentialKeyGenerator(InMemoryCounterDAO(), alphabet=Alphabet.named('base62'), length=8)
    >>> generator.generate()
    '00000001'
"""

import logging
from abc import ABC, abstractmethod

from cloudkeygen.dao.base import CounterBaseDAO
from cloudkeygen.dao.exceptions import DataStoreError
from cloudkeygen.exceptions import CounterUnavailableError, InvalidConfigurationError
from cloudkeygen.models import Alphabet


logger = logging.getLogger(__name__)


class KeyGenerator(ABC):
    """Interface for key generators.

    Attributes:
        alphabet (Alphabet):
            Symbols keys are drawn from.
        length (int):
            Exact length of every generated key.

    Methods:
        generate() -> str:
            Return a new key of exactly `length` alphabet symbols.
            Raises a GeneratorError subclass on failure.

    Subclassing:
        Implementations must be safe to call concurrently from multiple
        threads. They must never return a key of another length or one
        holding symbols outside the alphabet.
    """

    def __init__(self, alphabet: Alphabet, length: int):
        if length < 1:
            raise InvalidConfigurationError(f'Key length must be a positive integer (given value: {length}).')
        self.alphabet = alphabet
        self.length = length

    @property
    def capacity(self) -> int:
        """Size of the key space (B^L)."""
        return self.alphabet.capacity(self.length)

    @abstractmethod
    def generate(self) -> str:
        """Generate a new key.

        Returns:
            str: key of exactly `length` alphabet symbols.

        Raises:
            CounterUnavailableError:
                If a shared counter can't be reached (retryable).
            KeySpaceExhaustedError:
                If no fresh key can be issued under this configuration.
            RandomSourceError:
                If the entropy source fails.
        """
        pass

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} base={self.alphabet.base} length={self.length}>'


class CounterKeyGenerator(KeyGenerator):
    """Base for generators deriving keys from a shared atomic counter.

    Uniqueness is delegated entirely to the counter: it must return strictly
    increasing values per namespace to every caller. There is no local
    caching and no retry, a failed increment surfaces as CounterUnavailableError.
    """

    def __init__(self, counter: CounterBaseDAO, alphabet: Alphabet, length: int, namespace: str):
        super().__init__(alphabet, length)
        if not namespace:
            raise InvalidConfigurationError('Counter namespace must be a non-empty string.')
        self.counter = counter
        self.namespace = namespace

    def next_index(self) -> int:
        """Increment the shared counter and return its new value."""
        try:
            return self.counter.increment(self.namespace)
        except DataStoreError as e:
            logger.error(
                'Shared counter is unavailable.',
                extra={'namespace': self.namespace, 'reason': str(e)},
            )
            raise CounterUnavailableError(f"Can't increment shared counter '{self.namespace}': {e}") from e
