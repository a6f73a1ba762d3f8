"""URL mapping service: the shorten and resolve operations.

The service sits between the lambda handlers and the Mapping Store DAO. It
never lets store exceptions escape; every outcome is returned as a result
value which the handlers match on:

    shorten()  ->  Shortened | StoreUnavailable
    resolve()  ->  Resolved | NotFound | StoreUnavailable

Example:
    >>> service = UrlMappingService(dao=UrlMappingDynamoDBDAO(table_name='mappings'))
    >>> match service.resolve('abc123'):
    ...     case Resolved(mapping=mapping):
    ...         print(mapping.long_url)
    ...     case NotFound():
    ...         print('not found')
    https://example.com/page
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from shortlinks.models import UrlMapping
from shortlinks.dao.base import UrlMappingBaseDAO
from shortlinks.dao.dynamodb import UrlMappingDynamoDBDAO
from shortlinks.dao.exceptions import DataStoreError, UrlMappingNotFoundError
from shortlinks.utils.config import AppConfig
from shortlinks.utils.helpers import compose_short_url
from shortlinks.utils.shortener import generate_short_id


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shortened:
    mapping: UrlMapping
    short_url: str


@dataclass(frozen=True)
class Resolved:
    mapping: UrlMapping


@dataclass(frozen=True)
class NotFound:
    short_id: str


@dataclass(frozen=True)
class StoreUnavailable:
    error: DataStoreError


type ShortenResult = Shortened | StoreUnavailable
type ResolveResult = Resolved | NotFound | StoreUnavailable


class UrlMappingService:
    """Create and look up URL mappings.

    Args:
        dao (UrlMappingBaseDAO):
            Mapping Store access.
        id_generator (Callable[[], str], optional):
            Source of new short IDs. Defaults to `generate_short_id`.
    """

    def __init__(self, dao: UrlMappingBaseDAO, id_generator: Callable[[], str] = generate_short_id):
        self.dao = dao
        self.id_generator = id_generator

    def shorten(self, long_url: str, host: str) -> ShortenResult:
        """Store a new mapping for `long_url` and compose its short URL.

        The write is unconditional. If the generated short ID is already taken,
        the existing mapping is overwritten.
        """
        mapping = UrlMapping(short_id=self.id_generator(), long_url=long_url)
        try:
            self.dao.put(mapping)
        except DataStoreError as e:
            return StoreUnavailable(error=e)
        return Shortened(mapping=mapping, short_url=compose_short_url(host, mapping.short_id))

    def resolve(self, short_id: str) -> ResolveResult:
        try:
            mapping = self.dao.get(short_id)
        except UrlMappingNotFoundError:
            return NotFound(short_id=short_id)
        except DataStoreError as e:
            return StoreUnavailable(error=e)
        logger.debug('Resolved short ID %s to %s.', short_id, mapping.long_url, extra={'shortId': short_id})
        return Resolved(mapping=mapping)


def service_from_config(config: AppConfig) -> UrlMappingService:
    """Build a UrlMappingService backed by the configured DynamoDB table."""
    dao = UrlMappingDynamoDBDAO(table_name=config.table_name, endpoint_url=config.endpoint_url)
    return UrlMappingService(dao=dao)
