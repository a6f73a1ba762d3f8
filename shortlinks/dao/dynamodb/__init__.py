from shortlinks.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlinks.dao.dynamodb.url_mapping_dynamodb_dao import UrlMappingDynamoDBDAO


__all__ = [
    'DynamoDBTableMixin',
    'UrlMappingDynamoDBDAO',
]
