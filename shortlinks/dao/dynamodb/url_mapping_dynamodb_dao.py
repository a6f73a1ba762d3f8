"""Data Access Object (DAO) implementation for URL mappings in DynamoDB

Table layout:
    partition key  shortId (S)
    attribute      longUrl (S)

Each DAO call is exactly one DynamoDB request (PutItem or GetItem). Reads use
DynamoDB's default (eventually consistent) read mode.

Example:
    >>> from shortlinks.models import UrlMapping
    >>> from shortlinks.dao.dynamodb import UrlMappingDynamoDBDAO

    >>> dao = UrlMappingDynamoDBDAO(table_name='shortlinks-dev-mappings')
    >>> dao.put(UrlMapping(short_id='abc123', long_url='https://example.com/page'))
    <UrlMappingDynamoDBDAO>
    >>> dao.get('abc123').long_url
    'https://example.com/page'
"""

from beartype import beartype

from shortlinks.models import UrlMapping
from shortlinks.constants import MappingAttr, MAX_PARTITION_KEY_BYTES
from shortlinks.dao.base import UrlMappingBaseDAO
from shortlinks.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlinks.dao.dynamodb.helpers import handle_dynamodb_error
from shortlinks.dao.exceptions import UrlMappingNotFoundError


class UrlMappingDynamoDBDAO(DynamoDBTableMixin, UrlMappingBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for URL mappings

    Methods:
        put(mapping: UrlMapping, **kwargs) -> UrlMappingDynamoDBDAO:
            Unconditionally write a mapping (PutItem).
            Raises DataStoreError on DynamoDB failures.

        get(short_id: str, **kwargs) -> UrlMapping:
            Point lookup of a mapping by short ID (GetItem).
            Raises UrlMappingNotFoundError when the short ID doesn't exist
            (or is too large to be a DynamoDB key).
            Raises DataStoreError on DynamoDB failures.
    """

    @handle_dynamodb_error
    @beartype
    def put(self, mapping: UrlMapping, **kwargs) -> 'UrlMappingDynamoDBDAO':
        # NOTE: No ConditionExpression: a colliding short ID replaces the
        #       previous mapping (last write wins).
        self.table.put_item(
            Item={
                MappingAttr.SHORT_ID.value: mapping.short_id,
                MappingAttr.LONG_URL.value: mapping.long_url,
            }
        )
        return self

    @handle_dynamodb_error
    @beartype
    def get(self, short_id: str, **kwargs) -> UrlMapping:
        # Oversized keys can never have been stored, and GetItem would reject them
        if len(short_id.encode('utf-8', 'surrogatepass')) > MAX_PARTITION_KEY_BYTES:
            raise UrlMappingNotFoundError(f"URL mapping with short ID '{short_id[:32]}...' not found.")

        response = self.table.get_item(Key={MappingAttr.SHORT_ID.value: short_id})

        item = response.get('Item')
        if item is None:
            raise UrlMappingNotFoundError(f"URL mapping with short ID '{short_id}' not found.")

        return UrlMapping(
            short_id=item[MappingAttr.SHORT_ID.value],
            long_url=item[MappingAttr.LONG_URL.value],
        )
