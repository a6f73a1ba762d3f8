"""Helper utilities for AWS lambda functions.

Functions:
    get_header(event: dict, name: str) -> str | None
        Case-insensitive lookup of an HTTP request header in an API Gateway event
    request_host(event: dict) -> str | None
        Host the client used to reach the API (Host header, then gateway domain)
    compose_short_url(host: str, short_id: str) -> str
        Public short URL for a short ID
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn unexpected handler exceptions into HTTP 500 responses

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlinks.utils.helpers import request_host, compose_short_url
        >>> event = {'headers': {'host': 'short.ly'}}
        >>> compose_short_url(request_host(event), 'abc123')
        'https://short.ly/abc123'
"""

import os
import functools
import logging
from collections.abc import Callable

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaHandler
from shortlinks.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.utils.runtime import running_locally
from shortlinks.utils.responses import response_500


logger = logging.getLogger(__name__)


def get_header(event: LambdaEvent, name: str) -> str | None:
    """Return a request header value from an API Gateway event.

    API Gateway passes headers through with whatever casing the client used,
    so the lookup ignores case.
    """
    headers = event.get('headers') or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def request_host(event: LambdaEvent) -> str | None:
    """Return the host the client used to reach the API.

    Prefers the `Host` request header and falls back to the gateway's
    `requestContext.domainName`. Returns None if neither is present.
    """
    host = get_header(event, 'Host')
    if host:
        return host
    return (event.get('requestContext') or {}).get('domainName') or None


def compose_short_url(host: str, short_id: str) -> str:
    """Get string representation of a short URL

    The host is used verbatim (it is neither validated nor escaped).

    Example:
        >>> compose_short_url('short.ly', 'abc123')
        'https://short.ly/abc123'
    """
    return f'https://{host}/{short_id}'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('TABLE_NAME')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'TABLE_NAME'
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


def guarantee_500_response(handler: LambdaHandler) -> LambdaHandler:
    """Decorator: respond with HTTP 500 when a Lambda handler raises unexpectedly.

    When running locally (SAM), the exception is re-raised instead so the
    traceback reaches the developer.
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in Lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
