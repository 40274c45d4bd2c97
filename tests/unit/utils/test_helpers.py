"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. require_environment() decorator behavior
   - 1.1. Ensures decorated functions execute when all env vars are present.
   - 1.2. Ensures missing or empty env vars raise a descriptive MissingEnvironmentVariableError.

2. guarantee_500_response() behavior

3. parse_bool() flag parsing
"""

import json

import pytest

from cloudkeygen.exceptions import ConfigurationError, MissingEnvironmentVariableError
from cloudkeygen.utils.helpers import guarantee_500_response, parse_bool, require_environment


# -------------------------------
# 1.1. require_environment() happy path
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """1.1. Decorated function executes when all env vars are present."""
    monkeypatch.setenv('ENV1', 'value1')
    monkeypatch.setenv('ENV2', 'value2')

    @require_environment('ENV1', 'ENV2')
    def sample_function(x: int) -> int:
        return x + 1

    assert sample_function(1) == 2


# -------------------------------
# 1.2. require_environment() missing or empty env vars
# -------------------------------


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'ENV1': None, 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': '', 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': None, 'ENV2': None}, ["'ENV1'", "'ENV2'"]),
        ({'ENV1': '', 'ENV2': ''}, ["'ENV1'", "'ENV2'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """1.2. Missing or empty env vars raise a descriptive MissingEnvironmentVariableError."""
    for name, value in env_setup.items():
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    @require_environment('ENV1', 'ENV2')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(MissingEnvironmentVariableError, match=expected_message) as exc_info:
        sample_function()
    assert isinstance(exc_info.value, ConfigurationError)


# -------------------------------
# 2. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """2.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('cloudkeygen.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """2.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('cloudkeygen.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_responses(monkeypatch):
    monkeypatch.setattr('cloudkeygen.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def lambda_handler(event, context):
        return {'statusCode': 200, 'body': '{}'}

    assert lambda_handler({}, None) == {'statusCode': 200, 'body': '{}'}


# -------------------------------
# 3. parse_bool() flag parsing
# -------------------------------


@pytest.mark.parametrize('value', ['1', 'true', 'True', ' YES ', 'on'])
def test_parse_bool_truthy(value):
    assert parse_bool(value) is True


@pytest.mark.parametrize('value', ['0', 'false', 'FALSE', 'no', 'off'])
def test_parse_bool_falsy(value):
    assert parse_bool(value) is False


@pytest.mark.parametrize('value', ['', 'maybe', '2', 'y'])
def test_parse_bool_invalid(value):
    with pytest.raises(ValueError, match='Invalid boolean flag'):
        parse_bool(value)
