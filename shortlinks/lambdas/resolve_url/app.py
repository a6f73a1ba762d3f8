import functools
import logging

from shortlinks.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaHandler
from shortlinks.constants import STORE_UNAVAILABLE
from shortlinks.exceptions import ConfigurationError, MissingFieldError
from shortlinks.schemas import ResolveRequest
from shortlinks.service import UrlMappingService, Resolved, NotFound, StoreUnavailable, service_from_config
from shortlinks.utils import load_config, guarantee_500_response
from shortlinks.utils.responses import response_301, response_400, response_404, response_500, response_503
from shortlinks.lambdas.resolve_url.constants import (
    MISSING_SHORT_ID,
    SHORT_ID_NOT_FOUND,
    REDIRECT_SUCCESS,
    CONFIGURATION_ERROR,
)


logger = logging.getLogger(__name__)


def create_handler(service: UrlMappingService) -> LambdaHandler:
    """Build the resolve_url Lambda handler around a UrlMappingService."""

    @guarantee_500_response
    def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        """Handle incoming API Gateway requests to resolve short URLs

        This Lambda handler follows this procedure to redirect clients:
        - Step 1: Extract shortId from request path
        - Step 2: Look up the mapping (via the service)
        - Step 3: Redirect client to the long URL, or respond with 404

        HTTP responses:
            301: Successful redirect
                headers:
                    Location: long URL
            400: Bad client request
                errorCode: MISSING_SHORT_ID
            404: No mapping for shortId
                message: URL not found
            503: Mapping store unavailable
                errorCode: STORE_UNAVAILABLE
            500: Internal server error

        Example:
            >>> event = {'pathParameters': {'shortId': 'abc123'}}
            >>> response = lambda_handler(event, None)
            >>> response['statusCode']
            301
            >>> response['headers']['Location']
            'https://foo.test'
        """
        # 1- Extract shortId from request's path
        try:
            request = ResolveRequest.from_event(event)
        except MissingFieldError as e:
            logger.info('Missing "shortId" in path. Responding with 400.', extra={'event': MISSING_SHORT_ID})
            return response_400(message=str(e), error_code=MISSING_SHORT_ID)

        # 2- Look up the mapping
        result = service.resolve(request.short_id)

        # 3- Redirect client or report the missing mapping
        match result:
            case Resolved(mapping=mapping):
                logger.info(
                    'Redirecting client to long URL. Responding with 301.',
                    extra={'event': REDIRECT_SUCCESS, 'shortId': mapping.short_id, 'longUrl': mapping.long_url},
                )
                return response_301(location=mapping.long_url)
            case NotFound(short_id=short_id):
                logger.info(
                    'URL mapping not found. Responding with 404.',
                    extra={'event': SHORT_ID_NOT_FOUND, 'shortId': short_id},
                )
                return response_404()
            case StoreUnavailable(error=error):
                logger.error(
                    'Failed to look up URL mapping. Responding with 503.',
                    exc_info=error,
                    extra={'event': STORE_UNAVAILABLE, 'shortId': request.short_id, 'reason': str(error)},
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
