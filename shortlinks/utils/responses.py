"""API Gateway Lambda proxy responses shared by the lambda handlers.

Error bodies follow one shape:

    {"message": "<Reason Phrase> (<detail>)", "errorCode": "<ERROR_CODE>"}
"""

import json

from shortlinks.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def _error_body(base: str, message: str | None, error_code: str | None) -> str:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json.dumps(body)


def response_200(body: dict) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_301(*, location: str) -> LambdaResponse:
    # Redirects carry no body
    return {
        'statusCode': 301,
        'headers': {'Location': location},
    }


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return {
        'statusCode': 400,
        'headers': dict(JSON_HEADERS),
        'body': _error_body('Bad Request', message, error_code),
    }


def response_404(message: str = 'URL not found') -> LambdaResponse:
    return {
        'statusCode': 404,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps({'message': message}),
    }


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return {
        'statusCode': 500,
        'headers': dict(JSON_HEADERS),
        'body': _error_body('Internal Server Error', message, error_code),
    }


def response_503(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return {
        'statusCode': 503,
        'headers': dict(JSON_HEADERS),
        'body': _error_body('Service Unavailable', message, error_code),
    }
