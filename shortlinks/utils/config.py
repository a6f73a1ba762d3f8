"""Application configuration management.

Configuration is read from the process environment once per Lambda execution
environment and captured in an immutable `AppConfig`, which is then passed
explicitly to whatever needs it (DAOs, services, handler factories).

Environment variables:
    TABLE_NAME           – Name of the DynamoDB table holding URL mappings (required).
    LOCALSTACK_ENDPOINT  – DynamoDB endpoint override, only honoured when running
                           locally (e.g., http://localstack:4566).

Typical usage inside a Lambda handler:
    >>> from shortlinks.utils.config import load_config
    >>> config = load_config()
    >>> config.table_name
    'shortlinks-dev-mappings'
"""

import os
import logging
from dataclasses import dataclass

from shortlinks.constants import ENV
from shortlinks.utils.helpers import require_environment
from shortlinks.utils.runtime import running_locally


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    table_name: str
    endpoint_url: str | None = None


@require_environment(ENV.DynamoDB.TABLE_NAME)
def load_config() -> AppConfig:
    """Build the application configuration from environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If `TABLE_NAME` is missing or empty.
    """
    endpoint_url = os.getenv(ENV.LocalStack.ENDPOINT) if running_locally() else None
    config = AppConfig(
        table_name=os.environ[ENV.DynamoDB.TABLE_NAME],
        endpoint_url=endpoint_url or None,
    )
    logger.debug('Loaded application config.', extra={'tableName': config.table_name, 'endpointUrl': config.endpoint_url})
    return config
