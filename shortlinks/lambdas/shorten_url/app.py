import functools
import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaHandler
from shortlinks.constants import STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError, InvalidJSONError, MissingFieldError
from shortlinks.schemas import ShortenRequest
from shortlinks.service import UrlMappingService, Shortened, StoreUnavailable, service_from_config
from shortlinks.utils import load_config, guarantee_500_response
from shortlinks.utils.responses import response_200, response_400, response_500, response_503
from shortlinks.lambdas.shorten_url.constants import (
    INVALID_JSON,
    MISSING_URL,
    MISSING_HOST,
    SHORT_URL_CREATED,
    CONFIGURATION_ERROR,
)


logger = logging.getLogger(__name__)

MISSING_FIELD_ERROR_CODES = {
    'url': MISSING_URL,
    'Host': MISSING_HOST,
}


def create_handler(service: UrlMappingService) -> LambdaHandler:
    """Build the shorten_url Lambda handler around a UrlMappingService."""

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        """Handle incoming API Gateway requests to shorten URLs

        This Lambda handler follows this procedure to shorten URLs:
        - Step 1: Parse the long URL (JSON body field `url`) and the Host header
        - Step 2: Generate a short ID and store the mapping (via the service)
        - Step 3: Respond to user with the composed short URL

        HTTP responses:
            200: Successful URL shortening
                shortUrl: https://<Host>/<shortId>
            400: Bad client request
                message: cause of bad request (invalid JSON, missing url or Host)
                errorCode: INVALID_JSON | MISSING_URL | MISSING_HOST
            503: Mapping store unavailable
                errorCode: STORE_UNAVAILABLE
            500: Internal server error

        Example:
            >>> event = {'body': '{"url": "https://example.com/page"}', 'headers': {'Host': 'short.ly'}}
            >>> response = lambda_handler(event, None)
            >>> response['statusCode']
            200
            >>> json.loads(response['body'])['shortUrl']
            'https://short.ly/3f9c1a'
        """
        # 1- Parse the request
        try:
            request = ShortenRequest.from_event(event)
        except InvalidJSONError as e:
            logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
            return response_400(message=str(e), error_code=INVALID_JSON)
        except MissingFieldError as e:
            error_code = MISSING_FIELD_ERROR_CODES.get(e.field, MISSING_URL)
            logger.info('Malformed shorten request. Responding with 400.', extra={'event': error_code, 'field': e.field})
            return response_400(message=str(e), error_code=error_code)

        # 2- Generate short ID and store the mapping
        result = service.shorten(request.url, request.host)

        # 3- Respond to user
        match result:
            case Shortened(mapping=mapping, short_url=short_url):
                logger.info(
                    'Shortened URL. Responding with 200.',
                    extra={'event': SHORT_URL_CREATED, 'shortId': mapping.short_id, 'longUrl': mapping.long_url},
                )
                return response_200({'shortUrl': short_url})
            case StoreUnavailable(error=error):
                logger.error(
                    'Failed to store URL mapping. Responding with 503.',
                    exc_info=error,
                    extra={'event': STORE_UNAVAILABLE, 'reason': str(error)},
                )
                return response_503(message='mapping store unavailable', error_code=STORE_UNAVAILABLE)

    return lambda_handler


@functools.cache
def _default_handler() -> LambdaHandler:
    return create_handler(service_from_config(load_config()))


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Lambda entry point: build the handler once per execution environment and delegate."""
    try:
        handler = _default_handler()
    except ConfigurationError:
        logger.exception('Failed to load application config. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()
    return handler(event, context)
