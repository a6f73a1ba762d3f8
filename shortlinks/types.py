from typing import Any
from collections.abc import Callable


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaHandler = Callable[[LambdaEvent, LambdaContext], LambdaResponse]

# Type aliases for boto3 resources (boto3 ships no static types for these)
type DynamoDBResource = Any
type DynamoDBTable = Any
