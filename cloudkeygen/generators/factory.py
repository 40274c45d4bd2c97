import logging

from cloudkeygen.constants import GeneratorStrategy
from cloudkeygen.dao.base import CounterBaseDAO
from cloudkeygen.exceptions import BadConfigurationError
from cloudkeygen.generators.base import KeyGenerator
from cloudkeygen.generators.random_generator import RandomKeyGenerator
from cloudkeygen.generators.sequential_generator import SequentialKeyGenerator
from cloudkeygen.generators.permutation_generator import PermutationKeyGenerator
from cloudkeygen.models import GeneratorSettings


logger = logging.getLogger(__name__)


def new_key_generator(settings: GeneratorSettings, counter: CounterBaseDAO | None = None) -> KeyGenerator:
    """Build the key generator selected by the settings

    Called once at startup. The returned generator is shared by every caller
    for the lifetime of the process; strategies are never switched at runtime.

    Args:
        settings (GeneratorSettings):
            Immutable generator configuration.
        counter (CounterBaseDAO | None):
            Shared counter. Required by the sequential and permutation strategies.

    Returns:
        KeyGenerator: the configured generator.

    Raises:
        BadConfigurationError:
            If the strategy is unknown or a counter-backed strategy has no counter.
        InvalidConfigurationError:
            If the permutation parameters are invalid.

    Example:
        >>> new_key_generator(GeneratorSettings(strategy='random'))
        <RandomKeyGenerator base=62 length=8>
    """
    strategy = settings.strategy
    if strategy not in set(GeneratorStrategy):
        raise BadConfigurationError(f'Unsupported generator type: {strategy}')

    if strategy == GeneratorStrategy.RANDOM:
        generator = RandomKeyGenerator(settings.alphabet, settings.length)
    elif counter is None:
        raise BadConfigurationError(f"Generator type '{strategy}' requires a shared counter.")
    elif strategy == GeneratorStrategy.SEQUENTIAL:
        generator = SequentialKeyGenerator(counter, settings.alphabet, settings.length, namespace=settings.namespace)
    else:
        generator = PermutationKeyGenerator(
            counter,
            settings.alphabet,
            settings.length,
            prime=settings.prime,
            primitive_root=settings.primitive_root,
            counter_start=settings.counter_start,
            namespace=settings.namespace,
            verify=settings.verify_parameters,
        )

    logger.info('Initialized key generator.', extra={'strategy': str(strategy), 'generator': repr(generator)})
    return generator
