"""Abstract base class for UrlMapping data access objects (DAOs).

This class establishes a consistent contract for all UrlMapping DAO implementations,
regardless of the underlying storage mechanism (e.g., DynamoDB, Redis, PostgreSQL).

Responsibilities:
    - Provide an interface for writing and retrieving UrlMapping objects.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinks.models import UrlMapping
        >>> from shortlinks.dao.dynamodb import UrlMappingDynamoDBDAO

        >>> dao = UrlMappingDynamoDBDAO(table_name='shortlinks-dev-mappings')
        >>> dao.put(UrlMapping(short_id='a1b2c3', long_url='https://example.com/blog/article-123'))

        >>> dao.get('a1b2c3').long_url
        'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod

from shortlinks.models import UrlMapping


class UrlMappingBaseDAO(ABC):
    """Interface for UrlMapping data access objects (DAOs).

    Methods:
        put(mapping: UrlMapping, **kwargs) -> UrlMappingBaseDAO:
            Write a mapping, overwriting any existing mapping with the same short ID.
            Raises DataStoreError on connection or write failure.

        get(short_id: str, **kwargs) -> UrlMapping:
            Retrieve a mapping by short ID.
            Raises UrlMappingNotFoundError if the mapping does not exist.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Mappings are never updated or deleted by the application, so the DAO
          exposes no update or delete operations.
    """

    @abstractmethod
    def put(self, mapping: UrlMapping, **kwargs) -> 'UrlMappingBaseDAO':
        """Write a UrlMapping to the data store.

        The write is unconditional: an existing mapping with the same short ID
        is replaced (last write wins).

        Args:
            mapping (UrlMapping):
                The mapping to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlMappingBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short_id: str, **kwargs) -> UrlMapping:
        """Retrieve a UrlMapping from the data store by its short ID.

        Args:
            short_id (str):
                The short ID of the mapping, used verbatim.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlMapping: The stored mapping.

        Raises:
            UrlMappingNotFoundError:
                If no mapping with the given short ID exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
