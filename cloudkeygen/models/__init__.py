from cloudkeygen.models.alphabet_model import Alphabet
from cloudkeygen.models.generator_settings_model import GeneratorSettings


__all__ = [
    'Alphabet',
    'GeneratorSettings',
]
