"""Runtime detection

Local runs (`sam local invoke`/`sam local start-api`, or APP_ENV=local)
surface unhandled exceptions with their traceback instead of a generic 500.
"""

import os

from cloudkeygen.constants import ENV


def running_locally() -> bool:
    """Return True if running in SAM local invoke/api, False otherwise."""
    if os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true':
        return True
    return os.getenv(ENV.App.APP_ENV, '').lower() == 'local'
