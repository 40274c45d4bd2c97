from cloudkeygen.utils.config import app_env, app_name, app_prefix, load_config, load_generator_settings, redis_settings
from cloudkeygen.utils.helpers import require_environment, guarantee_500_response
from cloudkeygen.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'load_generator_settings',
    'redis_settings',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
