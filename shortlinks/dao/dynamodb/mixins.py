"""DynamoDB mixin providing shared table initialization and connectivity checks.

Responsibilities:
    - Initialize the boto3 DynamoDB Table resource
    - Healthcheck the table

Classes:
    - DynamoDBTableMixin: Base mixin to inject DynamoDB table setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class UrlMappingDynamoDBDAO(DynamoDBTableMixin, UrlMappingBaseDAO):
        ...     pass
        ...
        >>> dao = UrlMappingDynamoDBDAO(table_name='shortlinks-dev-mappings')
        >>> dao._healthcheck()
        True
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shortlinks.types import DynamoDBResource, DynamoDBTable
from shortlinks.exceptions import BadConfigurationError
from shortlinks.dao.exceptions import DataStoreError


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup and health check for DynamoDB-backed DAOs.

    Attributes:
        table (boto3 DynamoDB Table resource):
            Table used by subclasses for item operations.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Describe the table to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        table_name: str | None = None,
        endpoint_url: str | None = None,
        region_name: str | None = None,
        dynamodb_resource: DynamoDBResource | None = None,
        table: DynamoDBTable | None = None,
    ):
        """Initialize a DynamoDB-based DAO

        The option is given to either use an existing Table (or DynamoDB service
        resource) or create one from the table name and connection parameters.

        No request is sent to DynamoDB here; boto3 resources are lazy.

        Args:
            table_name (str | None):
                Name of the DynamoDB table. Required unless `table` is given.

            endpoint_url (str | None):
                DynamoDB endpoint override (e.g., LocalStack). Defaults to AWS.

            region_name (str | None):
                AWS region. Defaults to the boto3 environment configuration.

            dynamodb_resource (DynamoDBResource | None):
                Pre-initialized boto3 DynamoDB service resource.

            table (DynamoDBTable | None):
                Pre-initialized boto3 DynamoDB Table resource.

        Raises:
            BadConfigurationError:
                If neither `table` nor `table_name` is provided.
        """
        if table is None:
            if not table_name:
                raise BadConfigurationError('A DynamoDB table name is required when no table resource is given.')
            if dynamodb_resource is None:
                dynamodb_resource = boto3.resource('dynamodb', endpoint_url=endpoint_url, region_name=region_name)
            table = dynamodb_resource.Table(table_name)

        self.table = table

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """DescribeTable to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if the table is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If the table cannot be described and raise_error=True.
        """
        try:
            self.table.load()
        except (ClientError, BotoCoreError) as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't reach DynamoDB table '{self.table.name}'. Check the provided configuration parameters."
                ) from e
            return False
        else:
            return True
