from shortlinks.utils.config import AppConfig, load_config
from shortlinks.utils.helpers import get_header, request_host, compose_short_url, require_environment, guarantee_500_response
from shortlinks.utils.shortener import generate_short_id
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'AppConfig',
    'load_config',
    'generate_short_id',
    'get_header',
    'request_host',
    'compose_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
