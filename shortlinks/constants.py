from enum import StrEnum


# Short IDs are the first 6 characters of a UUID4 hex string
SHORT_ID_LENGTH = 6

# DynamoDB rejects partition key values larger than this (UTF-8 bytes)
MAX_PARTITION_KEY_BYTES = 2048


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class DynamoDB(StrEnum):
        TABLE_NAME = 'TABLE_NAME'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


class MappingAttr(StrEnum):
    """Attribute names of a mapping item in the DynamoDB table."""

    SHORT_ID = 'shortId'  # partition key
    LONG_URL = 'longUrl'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
