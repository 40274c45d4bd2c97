from dataclasses import dataclass, field
from typing import Optional

from cloudkeygen.constants import Alphabets, Defaults, GeneratorStrategy
from cloudkeygen.models.alphabet_model import Alphabet


@dataclass(frozen=True)
class GeneratorSettings:
    """Immutable key generator parameters, fixed at process start.

    Attributes:
        strategy (GeneratorStrategy):
            Which generator to build: random, sequential or permutation.
        alphabet (Alphabet):
            Key symbols. Defaults to base62.
        length (int):
            Exact key length L.
        prime (int):
            Permutation modulus p. Must be prime and smaller than B^L.
        primitive_root (int):
            Permutation base g. Must be a primitive root modulo p.
        counter_start (int):
            Offset added to every counter value before permuting.
        counter_namespace (Optional[str]):
            Shared counter namespace. Defaults to the strategy name.
        verify_parameters (bool):
            Verify primality of p and the order of g at startup.

    Example:
        >>> settings = GeneratorSettings(strategy=GeneratorStrategy.PERMUTATION, prime=23, primitive_root=5)
        >>> settings.namespace
        'permutation'
        >>> settings.capacity
        218340105584896
    """

    strategy: GeneratorStrategy = GeneratorStrategy.RANDOM
    alphabet: Alphabet = field(default_factory=lambda: Alphabet(Alphabets.BASE62))
    length: int = Defaults.KEY_LENGTH
    prime: int = Defaults.PRIME
    primitive_root: int = Defaults.PRIMITIVE_ROOT
    counter_start: int = Defaults.COUNTER_START
    counter_namespace: Optional[str] = None
    verify_parameters: bool = True

    @property
    def namespace(self) -> str:
        return self.counter_namespace or str(self.strategy)

    @property
    def capacity(self) -> int:
        return self.alphabet.capacity(self.length)
