"""Helper utilities for AWS lambda functions.

Functions:
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response
    parse_bool(value: str) -> bool
        Parse a boolean flag from an environment variable value

Example:
    >>> @require_environment('APPCONFIG_APP_ID')
    ... def load():
    ...     pass
    >>> load()
    MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID'
"""

import os
import json
import logging
import functools
from collections.abc import Callable

from cloudkeygen.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from cloudkeygen.exceptions import MissingEnvironmentVariableError
from cloudkeygen.utils.runtime import running_locally


logger = logging.getLogger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def fetch_redis_settings():
        ...     pass
        >>> fetch_redis_settings()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with 500 instead of crashing on unexpected errors.

    When running locally the exception is re-raised to keep the traceback
    visible in SAM.
    """

    @functools.wraps(handler)
    def wrapper(event, context):
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return {
                'statusCode': 500,
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper


def parse_bool(value: str) -> bool:
    """Parse 'true'/'false'-like flags (case-insensitive).

    Raises:
        ValueError: If the value is not a recognized flag.
    """
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f'Invalid boolean flag: {value!r}')
