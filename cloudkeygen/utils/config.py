"""Utility functions for application configuration management.

Generator settings are read from environment variables once, at cold start,
and never change for the lifetime of the process:

    GENERATOR_TYPE               random | sequential | permutation (default: random)
    GENERATOR_ALPHABET           base62 | base56 | <custom symbols> (default: base62)
    NUMBER_DIGITS                key length (default: 8)
    GENERATOR_PRIME              permutation modulus p (default: 1000003)
    GENERATOR_PRIME_PRIMITIVE    primitive root g of p (default: 2)
    GENERATOR_INCREMENT_START    offset added to counter values (default: 0)
    GENERATOR_COUNTER_NAMESPACE  shared counter name (default: strategy name)
    GENERATOR_VERIFY_PARAMETERS  verify (p, g) at startup (default: true)

Redis connection settings for the shared counter come from **AWS AppConfig**
when the AppConfig identifiers are set, with the same document layout as the
rest of the platform:

    {
        "active_backend": "redis",
        "configs": {
            "generate_key": {
                "redis": { "host": ..., "port": ..., "db": ... }
            }
        }
    }

Otherwise they fall back to the `REDIS_URL` environment variable.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), `'local'` by default.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the Redis key prefix `<app name>:<app env>`, or None.

    load_config(lambda_name: str) -> dict
        Load a Lambda's configuration section from AWS AppConfig.

    load_generator_settings() -> GeneratorSettings
        Build immutable generator settings from the environment.

    redis_settings(lambda_name: str) -> dict
        Return DAO keyword arguments for the Redis connection.

Example:
    >>> from cloudkeygen.utils.config import load_generator_settings
    >>> os.environ['GENERATOR_TYPE'] = 'permutation'
    >>> load_generator_settings().strategy
    <GeneratorStrategy.PERMUTATION: 'permutation'>
"""

import os
import json
import logging

import boto3

from cloudkeygen.constants import ENV, Defaults, GeneratorStrategy
from cloudkeygen.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from cloudkeygen.models import Alphabet, GeneratorSettings
from cloudkeygen.types import LambdaConfiguration
from cloudkeygen.utils.helpers import require_environment, parse_bool


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    return None if app_name() is None else f'{app_name()}:{app_env()}'


@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(lambda_name: str) -> LambdaConfiguration:
    """Load configuration for a given Lambda from AWS AppConfig.

    Fetches the AppConfig JSON once and returns the active backend's section
    for the requested Lambda function (e.g., 'generate_key').

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Returns:
        dict: {<backend>: <backend config>} for the lambda.

    Raises:
        MissingEnvironmentVariableError:
            If any AppConfig identifier is missing.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    config = json.loads(content.decode('utf-8'))

    backend = config['active_backend']
    data = {backend: config['configs'][lambda_name][backend]}
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': config.get('build')})
    return data


def redis_settings(lambda_name: str) -> dict:
    """Return RedisClientMixin keyword arguments for the shared counter

    Prefers AppConfig; falls back to `REDIS_URL` when AppConfig isn't configured.

    Example:
        >>> redis_settings('generate_key')
        {'redis_host': 'redis.internal', 'redis_port': 6379, 'redis_db': 0}
    """
    try:
        app_config = load_config(lambda_name)
    except MissingEnvironmentVariableError:
        logger.debug('AppConfig is not configured. Using REDIS_URL for the shared counter.')
        return {'redis_url': os.environ.get(ENV.Redis.URL, Defaults.REDIS_URL)}

    if 'redis' not in app_config:
        raise BadConfigurationError(f"Lambda '{lambda_name}' requires the redis backend (given: {', '.join(app_config)}).")
    return {f'redis_{k}': v for k, v in app_config['redis'].items()}


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw.replace('_', ''))
    except ValueError:
        raise BadConfigurationError(f'Invalid integer for {name}: {raw!r}') from None


def load_generator_settings() -> GeneratorSettings:
    """Build generator settings from environment variables

    Only parses and type-checks values. Number theoretic validation of the
    permutation parameters happens when the generator is built.

    Raises:
        BadConfigurationError:
            If a value can't be parsed, the strategy is unknown or the alphabet is invalid.
    """
    raw_strategy = os.environ.get(ENV.Generator.TYPE, GeneratorStrategy.RANDOM).strip().lower()
    try:
        strategy = GeneratorStrategy(raw_strategy)
    except ValueError:
        raise BadConfigurationError(f'Unsupported generator type: {raw_strategy}') from None

    try:
        alphabet = Alphabet.named(os.environ.get(ENV.Generator.ALPHABET, Defaults.ALPHABET))
    except ValueError as e:
        raise BadConfigurationError(f'Invalid alphabet: {e}') from e

    try:
        verify_parameters = parse_bool(os.environ.get(ENV.Generator.VERIFY_PARAMETERS, 'true'))
    except ValueError as e:
        raise BadConfigurationError(str(e)) from e

    length = _int_from_env(ENV.Generator.LENGTH, Defaults.KEY_LENGTH)
    if length < 1:
        raise BadConfigurationError(f'Key length must be a positive integer (given value: {length}).')

    settings = GeneratorSettings(
        strategy=strategy,
        alphabet=alphabet,
        length=length,
        prime=_int_from_env(ENV.Generator.PRIME, Defaults.PRIME),
        primitive_root=_int_from_env(ENV.Generator.PRIMITIVE_ROOT, Defaults.PRIMITIVE_ROOT),
        counter_start=_int_from_env(ENV.Generator.COUNTER_START, Defaults.COUNTER_START),
        counter_namespace=os.environ.get(ENV.Generator.COUNTER_NAMESPACE) or None,
        verify_parameters=verify_parameters,
    )
    logger.debug(
        'Loaded generator settings.',
        extra={'strategy': str(settings.strategy), 'base': settings.alphabet.base, 'length': settings.length},
    )
    return settings
