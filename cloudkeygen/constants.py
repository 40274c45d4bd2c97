import string
from enum import StrEnum


class GeneratorStrategy(StrEnum):
    """Key generation strategies selectable at startup."""

    RANDOM = 'random'
    SEQUENTIAL = 'sequential'
    PERMUTATION = 'permutation'


class Alphabets:
    """Named key alphabets.

    Symbols are kept in ASCII order so that lexicographic key order matches
    numeric order for the counter-backed generators.
    """

    BASE62 = string.digits + string.ascii_uppercase + string.ascii_lowercase
    # base62 without look-alike symbols: 0 O 1 I l o
    BASE56 = '23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnpqrstuvwxyz'

    NAMED = {
        'base62': BASE62,
        'base56': BASE56,
    }


class Defaults:
    """Default generator parameters."""

    ALPHABET = 'base62'
    KEY_LENGTH = 8
    PRIME = 1_000_003
    PRIMITIVE_ROOT = 2
    COUNTER_START = 0
    REDIS_URL = 'redis://localhost:6379/0'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'

    class Generator(StrEnum):
        TYPE = 'GENERATOR_TYPE'
        ALPHABET = 'GENERATOR_ALPHABET'
        LENGTH = 'NUMBER_DIGITS'
        PRIME = 'GENERATOR_PRIME'
        PRIMITIVE_ROOT = 'GENERATOR_PRIME_PRIMITIVE'
        COUNTER_START = 'GENERATOR_INCREMENT_START'
        COUNTER_NAMESPACE = 'GENERATOR_COUNTER_NAMESPACE'
        VERIFY_PARAMETERS = 'GENERATOR_VERIFY_PARAMETERS'

    class Redis(StrEnum):
        URL = 'REDIS_URL'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
