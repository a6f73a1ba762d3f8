import functools
from typing import Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from shortlinks.dao.exceptions import DataStoreError


__all__ = ['handle_dynamodb_error']


def handle_dynamodb_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to translate botocore errors

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations which may raise
            botocore.exceptions.ClientError (service-side failures such as
            throttling or a missing table) or botocore.exceptions.BotoCoreError
            (client-side failures such as connection errors and timeouts).

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on either failure.

    Example:
        >>> @handle_dynamodb_error
        ... def get_item(self, key):
        ...     return self.table.get_item(Key=key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise DataStoreError(f"DynamoDB request on table '{self.table.name}' failed ({error_code}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't connect to DynamoDB table '{self.table.name}'.") from e

    return wrapper
