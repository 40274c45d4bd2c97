"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Every record is one JSON document on stdout:
{
    "timestamp": "2026-10-17T12:00:00.000Z",
    "level": "INFO",
    "logger": "cloudkeygen.generators.factory",
    "message": "Initialized key generator.",
    "service": "cloudkeygen",
    "env": "prod",
    "strategy": "permutation"
}

Fields passed via `extra={...}` are attached at the top level. `service` and
`env` tell apart containers sharing one counter. Exceptions logged with
`logger.exception()` add an "exception" field with the traceback.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from cloudkeygen.constants import ENV


# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None).__dict__) | {'asctime', 'message'}


class ServiceContextFilter(logging.Filter):
    """Stamp records with the application name and environment."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = os.getenv(ENV.App.APP_NAME)
        record.env = os.getenv(ENV.App.APP_ENV, 'local').lower()
        return True


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in record.__dict__.items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # extras may hold exceptions or enums
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Route all logging to stdout as JSON.

    Args:
        level (str | None):
            Root log level. Defaults to `LOG_LEVEL` or INFO.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'filters': {
                'service': {'()': ServiceContextFilter},
            },
            'formatters': {
                'json': {'()': JsonFormatter},
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'filters': ['service'],
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
