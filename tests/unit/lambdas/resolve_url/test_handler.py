import json
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from shortlinks.types import LambdaEvent, LambdaContext
from shortlinks.models import UrlMapping
from shortlinks.dao.base import UrlMappingBaseDAO
from shortlinks.dao.dynamodb import UrlMappingDynamoDBDAO
from shortlinks.dao.exceptions import DataStoreError, UrlMappingNotFoundError
from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.service import UrlMappingService
from shortlinks.utils.config import AppConfig
from shortlinks.lambdas.resolve_url import app


def apigw_event(path_parameters: dict | None) -> LambdaEvent:
    return cast(
        LambdaEvent,
        {
            'resource': '/{shortId}',
            'pathParameters': path_parameters,
            'headers': {'User-Agent': 'pytest', 'Host': 'short.ly'},
            'httpMethod': 'GET',
            'path': '/abc123',
            'requestContext': {'resourcePath': '/{shortId}', 'httpMethod': 'GET', 'domainName': 'short.ly', 'stage': 'test'},
        },
    )


@pytest.fixture
def successful_event_301() -> LambdaEvent:
    return apigw_event({'shortId': 'abc123'})


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'resolve_url'})


class TestResolveUrlHandler:
    @pytest.fixture(autouse=True)
    def setup(self, context: LambdaContext) -> None:
        self.dao = MagicMock(spec=UrlMappingBaseDAO)
        self.dao.get.return_value = UrlMapping(short_id='abc123', long_url='https://foo.test')
        self.handler = app.create_handler(UrlMappingService(dao=self.dao))
        self.context = context

    def test_lambda_handler(self, successful_event_301: LambdaEvent) -> None:
        response = self.handler(successful_event_301, self.context)

        assert response == {'statusCode': 301, 'headers': {'Location': 'https://foo.test'}}
        self.dao.get.assert_called_once_with('abc123')

    def test_lambda_handler_with_unknown_short_id(self, successful_event_301: LambdaEvent) -> None:
        self.dao.get.side_effect = UrlMappingNotFoundError()

        response = self.handler(successful_event_301, self.context)

        assert response['statusCode'] == 404
        assert json.loads(response['body']) == {'message': 'URL not found'}

    @pytest.mark.parametrize('path_parameters', [None, {}, {'shortcode': 'abc123'}])
    def test_lambda_handler_with_invalid_path_parameters(self, path_parameters: dict | None) -> None:
        response = self.handler(apigw_event(path_parameters), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == "Bad Request (missing 'shortId' in path)"
        assert body['errorCode'] == 'MISSING_SHORT_ID'
        self.dao.get.assert_not_called()

    def test_lambda_handler_with_store_error(self, successful_event_301: LambdaEvent) -> None:
        self.dao.get.side_effect = DataStoreError("Can't connect to DynamoDB table 'shortlinks-test-mappings'.")

        response = self.handler(successful_event_301, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 503
        assert body['errorCode'] == 'STORE_UNAVAILABLE'
        assert self.dao.get.call_count == 1

    def test_lambda_handler_with_unexpected_error(self, successful_event_301: LambdaEvent) -> None:
        self.dao.get.side_effect = RuntimeError('boom')

        response = self.handler(successful_event_301, self.context)

        assert response['statusCode'] == 500
        assert json.loads(response['body'])['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


class TestResolveScenarios:
    @pytest.fixture(autouse=True)
    def setup(self, fake_dao, context: LambdaContext) -> None:
        self.fake_dao = fake_dao
        self.handler = app.create_handler(UrlMappingService(dao=fake_dao))
        self.context = context

    def test_resolve_missing_mapping(self, successful_event_301: LambdaEvent) -> None:
        response = self.handler(successful_event_301, self.context)

        assert response['statusCode'] == 404
        assert json.loads(response['body']) == {'message': 'URL not found'}

    def test_resolve_existing_mapping(self, successful_event_301: LambdaEvent) -> None:
        self.fake_dao.put(UrlMapping(short_id='abc123', long_url='https://foo.test'))

        response = self.handler(successful_event_301, self.context)

        assert response['statusCode'] == 301
        assert response['headers'] == {'Location': 'https://foo.test'}

    def test_collision_resolves_to_latest_mapping(self, successful_event_301: LambdaEvent) -> None:
        service = UrlMappingService(dao=self.fake_dao, id_generator=lambda: 'abc123')
        service.shorten('https://first.example', 'short.ly')
        service.shorten('https://second.example', 'short.ly')

        response = self.handler(successful_event_301, self.context)

        assert response['headers']['Location'] == 'https://second.example'

    def test_resolve_oversized_short_id_against_dynamodb(self) -> None:
        table = MagicMock()
        table.name = 'shortlinks-test-mappings'
        handler = app.create_handler(UrlMappingService(dao=UrlMappingDynamoDBDAO(table=table)))

        response = handler(apigw_event({'shortId': 'x' * 4096}), self.context)

        assert response['statusCode'] == 404
        assert json.loads(response['body']) == {'message': 'URL not found'}
        table.get_item.assert_not_called()


class TestLambdaEntryPoint:
    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, fake_dao, context: LambdaContext):
        fake_dao.put(UrlMapping(short_id='abc123', long_url='https://foo.test'))
        self.load_config = MagicMock(return_value=AppConfig(table_name='shortlinks-test-mappings'))
        monkeypatch.setattr(app, 'load_config', self.load_config)
        monkeypatch.setattr(app, 'service_from_config', lambda config: UrlMappingService(dao=fake_dao))
        self.context = context

        app._default_handler.cache_clear()
        yield
        app._default_handler.cache_clear()

    def test_lambda_handler(self, successful_event_301: LambdaEvent) -> None:
        response = app.lambda_handler(successful_event_301, self.context)

        assert response == {'statusCode': 301, 'headers': {'Location': 'https://foo.test'}}

    def test_lambda_handler_with_missing_configuration(self, successful_event_301: LambdaEvent) -> None:
        self.load_config.side_effect = MissingEnvironmentVariableError("Missing required environment variables: 'TABLE_NAME'")

        response = app.lambda_handler(successful_event_301, self.context)

        assert response['statusCode'] == 500
        assert json.loads(response['body']) == {'message': 'Internal Server Error'}

    def test_lambda_handler_retries_configuration_on_next_invocation(self, successful_event_301: LambdaEvent) -> None:
        self.load_config.side_effect = [
            MissingEnvironmentVariableError("Missing required environment variables: 'TABLE_NAME'"),
            AppConfig(table_name='shortlinks-test-mappings'),
        ]

        assert app.lambda_handler(successful_event_301, self.context)['statusCode'] == 500
        assert app.lambda_handler(successful_event_301, self.context)['statusCode'] == 301
