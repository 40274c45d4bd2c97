class KeyGenError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:keygen_error'


class GeneratorError(KeyGenError):
    """Base exception for errors raised while generating a key."""

    error_code = 'generator:generator_error'
    retryable = False


class CounterUnavailableError(GeneratorError):
    """Raised when the shared atomic counter can't be incremented.

    The increment either happened or it didn't, so callers may retry.
    """

    error_code = 'generator:counter_unavailable'
    retryable = True


class KeySpaceExhaustedError(GeneratorError):
    """Raised when a counter value can no longer be mapped to a fresh key.

    Terminal for the current configuration: it takes a longer key or a
    different prime to recover.
    """

    error_code = 'generator:key_space_exhausted'


class RandomSourceError(GeneratorError):
    """Raised when the operating system entropy source is unavailable."""

    error_code = 'generator:random_source_failure'


class ConfigurationError(KeyGenError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InvalidConfigurationError(BadConfigurationError):
    """Raised when permutation parameters can't produce a full-period sequence.

    e.g. the modulus is not prime, the root is not a primitive root of the
    modulus or the modulus doesn't fit in the key space.
    """

    error_code = 'config:invalid_generator_parameters'
