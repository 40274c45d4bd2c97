"""Unit tests for RandomKeyGenerator.

Test coverage includes:
    1. Key shape
       - Keys have the configured length and only hold alphabet symbols.
    2. Distribution
       - Every symbol is drawn with roughly equal frequency at every key position.
       - Consecutive keys don't collide in a large key space.
    3. Error handling
       - Entropy source failures raise RandomSourceError.
       - Invalid lengths raise InvalidConfigurationError.
"""

from collections import Counter

import pytest

from cloudkeygen.exceptions import InvalidConfigurationError, RandomSourceError
from cloudkeygen.generators import RandomKeyGenerator
from cloudkeygen.generators import random_generator
from cloudkeygen.models import Alphabet


# -------------------------------
# 1. Key shape
# -------------------------------


@pytest.mark.parametrize('name, length', [('base62', 8), ('base56', 6), ('01', 16), ('base62', 1)])
def test_keys_have_configured_shape(name, length):
    alphabet = Alphabet.named(name)
    generator = RandomKeyGenerator(alphabet, length)

    for _ in range(200):
        key = generator.generate()
        assert len(key) == length
        assert alphabet.contains(key)


def test_repr():
    generator = RandomKeyGenerator(Alphabet.named('base62'), 8)
    assert repr(generator) == '<RandomKeyGenerator base=62 length=8>'
    assert generator.capacity == 62**8


# -------------------------------
# 2. Distribution
# -------------------------------


def test_symbols_are_roughly_uniform_at_every_position():
    alphabet = Alphabet('abcd')
    generator = RandomKeyGenerator(alphabet, 10)

    keys = [generator.generate() for _ in range(4000)]

    # 1000 expected per symbol and position; 200 off is ~7 standard deviations
    for position in range(10):
        counts = Counter(key[position] for key in keys)
        assert set(counts) == set(alphabet.symbols), position
        for symbol in alphabet.symbols:
            assert 800 < counts[symbol] < 1200, (position, symbol, counts[symbol])


def test_keys_do_not_collide_in_large_key_space(base62):
    generator = RandomKeyGenerator(base62, 8)
    keys = {generator.generate() for _ in range(5000)}
    assert len(keys) == 5000


# -------------------------------
# 3. Error handling
# -------------------------------


@pytest.mark.parametrize('error', [OSError('getrandom() failed'), NotImplementedError('no entropy source')])
def test_entropy_failure_raises_random_source_error(monkeypatch, base62, error):
    def failing_choice(seq):
        raise error

    monkeypatch.setattr(random_generator.secrets, 'choice', failing_choice)
    generator = RandomKeyGenerator(base62, 8)

    with pytest.raises(RandomSourceError) as exc_info:
        generator.generate()
    assert exc_info.value.error_code == 'generator:random_source_failure'
    assert exc_info.value.retryable is False


@pytest.mark.parametrize('length', [0, -1])
def test_invalid_length(base62, length):
    with pytest.raises(InvalidConfigurationError):
        RandomKeyGenerator(base62, length)
