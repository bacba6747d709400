from edgelinks.utils.config import app_env, app_name, app_prefix, load_config
from edgelinks.utils.helpers import base_url, get_short_url, require_environment, guarantee_500_response
from edgelinks.utils.logging import initialize_logging
from edgelinks.utils.runtime import running_locally


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
    'running_locally',
]
