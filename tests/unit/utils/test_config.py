"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name(), app_prefix() correctly read environment variables.

2. AppConfig loading behavior
   - Ensures load_config() correctly returns parsed AppConfig configuration data.
   - Ensures load_config() requires the AppConfig identifiers.
   - Ensures load_config() propagates ClientError when AppConfig calls fail.

3. Redis settings
   - Ensures redis_settings() maps AppConfig values to DAO keyword arguments.
   - Ensures redis_settings() falls back to REDIS_URL without AppConfig.

4. Generator settings
   - Ensures load_generator_settings() applies defaults.
   - Ensures every GENERATOR_* variable is parsed.
   - Ensures unparsable values raise BadConfigurationError.
"""

import json
from io import BytesIO
from unittest.mock import MagicMock

import pytest
import botocore

from cloudkeygen.constants import GeneratorStrategy
from cloudkeygen.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from cloudkeygen.utils import config


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def appconfig_env(monkeypatch):
    """Set up AppConfig environment variables for testing."""
    monkeypatch.setenv('APPCONFIG_APP_ID', 'app123')
    monkeypatch.setenv('APPCONFIG_ENV_ID', 'env123')
    monkeypatch.setenv('APPCONFIG_PROFILE_ID', 'prof123')


@pytest.fixture
def appconfig_payload():
    """Provide a default AppConfig payload used by multiple tests."""
    # fmt: off
    return {
        'build': 42,
        'active_backend': 'redis',
        'configs': {
            'generate_key': {
                'redis': {
                    'host': 'monkey',
                    'port': 6380,
                    'db': 3
                }
            }
        },
    }
    # fmt: on


@pytest.fixture
def mock_appconfig(monkeypatch, appconfig_payload):
    """Mock the AppConfig Data client returned by boto3."""
    client = MagicMock()
    client.start_configuration_session.return_value = {'InitialConfigurationToken': 'monkey_token'}
    client.get_latest_configuration.return_value = {'Configuration': BytesIO(json.dumps(appconfig_payload).encode('utf-8'))}
    monkeypatch.setattr(config.boto3, 'client', lambda service: client)
    return client


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'Test')
    assert config.app_env() == 'test'


def test_app_env_defaults_to_local():
    assert config.app_env() == 'local'


def test_app_name(monkeypatch):
    monkeypatch.setenv('APP_NAME', 'test-app')
    assert config.app_name() == 'test-app'


def test_app_name_not_set():
    assert config.app_name() is None


def test_app_prefix(monkeypatch):
    monkeypatch.setenv('APP_NAME', 'test-app')
    monkeypatch.setenv('APP_ENV', 'test')
    assert config.app_prefix() == 'test-app:test'


def test_app_prefix_without_app_name():
    assert config.app_prefix() is None


# -------------------------------
# 2. AppConfig loading behavior
# -------------------------------


def test_load_config(appconfig_env, mock_appconfig):
    result = config.load_config('generate_key')

    assert result == {'redis': {'host': 'monkey', 'port': 6380, 'db': 3}}
    mock_appconfig.start_configuration_session.assert_called_once_with(
        ApplicationIdentifier='app123',
        EnvironmentIdentifier='env123',
        ConfigurationProfileIdentifier='prof123',
    )
    mock_appconfig.get_latest_configuration.assert_called_once_with(ConfigurationToken='monkey_token')


def test_load_config_requires_appconfig_identifiers(mock_appconfig):
    with pytest.raises(MissingEnvironmentVariableError, match="'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID', 'APPCONFIG_PROFILE_ID'"):
        config.load_config('generate_key')
    mock_appconfig.start_configuration_session.assert_not_called()


def test_load_config_propagates_client_error(monkeypatch, appconfig_env):
    client = MagicMock()
    client.start_configuration_session.side_effect = botocore.exceptions.ClientError(
        {'Error': {'Code': 'ResourceNotFoundException'}}, 'StartConfigurationSession'
    )
    monkeypatch.setattr(config.boto3, 'client', lambda service: client)

    with pytest.raises(botocore.exceptions.ClientError):
        config.load_config('generate_key')


# -------------------------------
# 3. Redis settings
# -------------------------------


def test_redis_settings_from_appconfig(appconfig_env, mock_appconfig):
    assert config.redis_settings('generate_key') == {'redis_host': 'monkey', 'redis_port': 6380, 'redis_db': 3}


def test_redis_settings_require_redis_backend(monkeypatch, appconfig_env):
    monkeypatch.setattr(config, 'load_config', lambda lambda_name: {'dynamodb': {'table': 'counters'}})

    with pytest.raises(BadConfigurationError, match='requires the redis backend'):
        config.redis_settings('generate_key')


def test_redis_settings_fall_back_to_redis_url(monkeypatch):
    monkeypatch.setenv('REDIS_URL', 'redis://redis.test:6379/1')
    assert config.redis_settings('generate_key') == {'redis_url': 'redis://redis.test:6379/1'}


def test_redis_settings_default_redis_url():
    assert config.redis_settings('generate_key') == {'redis_url': 'redis://localhost:6379/0'}


# -------------------------------
# 4. Generator settings
# -------------------------------


def test_generator_settings_defaults():
    settings = config.load_generator_settings()

    assert settings.strategy == GeneratorStrategy.RANDOM
    assert settings.alphabet.base == 62
    assert settings.length == 8
    assert settings.prime == 1_000_003
    assert settings.primitive_root == 2
    assert settings.counter_start == 0
    assert settings.namespace == 'random'
    assert settings.verify_parameters is True


def test_generator_settings_from_environment(monkeypatch):
    monkeypatch.setenv('GENERATOR_TYPE', ' Permutation ')
    monkeypatch.setenv('GENERATOR_ALPHABET', 'base56')
    monkeypatch.setenv('NUMBER_DIGITS', '7')
    monkeypatch.setenv('GENERATOR_PRIME', '37_845_836_980_717')
    monkeypatch.setenv('GENERATOR_PRIME_PRIMITIVE', '2')
    monkeypatch.setenv('GENERATOR_INCREMENT_START', '1000')
    monkeypatch.setenv('GENERATOR_COUNTER_NAMESPACE', 'keys:v2')
    monkeypatch.setenv('GENERATOR_VERIFY_PARAMETERS', 'no')

    settings = config.load_generator_settings()

    assert settings.strategy == GeneratorStrategy.PERMUTATION
    assert settings.alphabet.base == 56
    assert settings.length == 7
    assert settings.prime == 37845836980717
    assert settings.primitive_root == 2
    assert settings.counter_start == 1000
    assert settings.namespace == 'keys:v2'
    assert settings.verify_parameters is False


def test_generator_settings_with_custom_alphabet(monkeypatch):
    monkeypatch.setenv('GENERATOR_ALPHABET', 'abcdef')
    assert config.load_generator_settings().alphabet.symbols == 'abcdef'


def test_generator_settings_with_empty_values(monkeypatch):
    monkeypatch.setenv('GENERATOR_PRIME', '')
    monkeypatch.setenv('GENERATOR_COUNTER_NAMESPACE', '')

    settings = config.load_generator_settings()

    assert settings.prime == 1_000_003
    assert settings.counter_namespace is None


@pytest.mark.parametrize(
    'name, value, match',
    [
        ('GENERATOR_TYPE', 'lottery', 'Unsupported generator type: lottery'),
        ('GENERATOR_ALPHABET', 'aab', 'Invalid alphabet'),
        ('GENERATOR_ALPHABET', 'a', 'Invalid alphabet'),
        ('NUMBER_DIGITS', 'eight', "Invalid integer for NUMBER_DIGITS: 'eight'"),
        ('NUMBER_DIGITS', '0', 'Key length must be a positive integer'),
        ('GENERATOR_PRIME', '1e6', "Invalid integer for GENERATOR_PRIME: '1e6'"),
        ('GENERATOR_PRIME_PRIMITIVE', 'two', 'Invalid integer for GENERATOR_PRIME_PRIMITIVE'),
        ('GENERATOR_INCREMENT_START', '1.5', 'Invalid integer for GENERATOR_INCREMENT_START'),
        ('GENERATOR_VERIFY_PARAMETERS', 'maybe', 'Invalid boolean flag'),
    ],
)
def test_generator_settings_with_invalid_values(monkeypatch, name, value, match):
    monkeypatch.setenv(name, value)

    with pytest.raises(BadConfigurationError, match=match):
        config.load_generator_settings()
