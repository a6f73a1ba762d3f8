from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError


@pytest.fixture
def table_name() -> str:
    return 'shortlinks-test-mappings'


@pytest.fixture
def table(table_name: str) -> MagicMock:
    """Mock a boto3 DynamoDB Table resource."""
    _table = MagicMock()
    _table.name = table_name
    _table.get_item.return_value = {}
    _table.put_item.return_value = {}
    return _table


@pytest.fixture
def throttling_error() -> ClientError:
    return ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'Rate exceeded'}},
        'PutItem',
    )


@pytest.fixture
def connection_error() -> EndpointConnectionError:
    return EndpointConnectionError(endpoint_url='http://localstack:4566')
