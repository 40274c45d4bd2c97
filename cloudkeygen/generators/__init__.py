from cloudkeygen.generators.base import KeyGenerator, CounterKeyGenerator
from cloudkeygen.generators.random_generator import RandomKeyGenerator
from cloudkeygen.generators.sequential_generator import SequentialKeyGenerator
from cloudkeygen.generators.permutation_generator import PermutationKeyGenerator
from cloudkeygen.generators.factory import new_key_generator


__all__ = [
    'KeyGenerator',
    'CounterKeyGenerator',
    'RandomKeyGenerator',
    'SequentialKeyGenerator',
    'PermutationKeyGenerator',
    'new_key_generator',
]
