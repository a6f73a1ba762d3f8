"""Typed request schemas for the lambda handlers.

Each schema is built from an API Gateway (Lambda proxy) event at the handler
boundary. Anything that doesn't fit the expected shape raises a
`MalformedRequestError` before business logic runs. The values themselves are
not validated: any string is an acceptable URL, host, or short ID.
"""

import base64
import binascii
import json
from dataclasses import dataclass

from shortlinks.types import LambdaEvent
from shortlinks.exceptions import InvalidJSONError, MissingFieldError
from shortlinks.utils.helpers import request_host


def _request_body(event: LambdaEvent) -> str:
    body = event.get('body') or ''
    if body and event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidJSONError('invalid base64 body') from e
    return body or '{}'


@dataclass(frozen=True)
class ShortenRequest:
    url: str    # Long URL from JSON body field `url`
    host: str   # Host the client used, from the `Host` header

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ShortenRequest':
        """Parse a shorten request.

        Raises:
            InvalidJSONError: If the body is not valid JSON.
            MissingFieldError: If `url` is missing or not a string, or no host is known.

        Example:
            >>> ShortenRequest.from_event({'body': '{"url": "https://example.com"}', 'headers': {'Host': 'short.ly'}})
            ShortenRequest(url='https://example.com', host='short.ly')
        """
        try:
            payload = json.loads(_request_body(event))
        except (json.JSONDecodeError, RecursionError) as e:
            raise InvalidJSONError('invalid JSON body') from e

        if not isinstance(payload, dict):
            raise MissingFieldError('url', "JSON body must be an object with a 'url' field")
        if 'url' not in payload:
            raise MissingFieldError('url', "missing 'url' in JSON body")
        if not isinstance(payload['url'], str):
            raise MissingFieldError('url', "'url' in JSON body must be a string")

        host = request_host(event)
        if not host:
            raise MissingFieldError('Host', "missing 'Host' header")

        return cls(url=payload['url'], host=host)


@dataclass(frozen=True)
class ResolveRequest:
    short_id: str   # Short ID from path parameter `shortId`

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ResolveRequest':
        """Parse a resolve request.

        Raises:
            MissingFieldError: If the `shortId` path parameter is missing.
        """
        short_id = (event.get('pathParameters') or {}).get('shortId')
        if not isinstance(short_id, str) or not short_id:
            raise MissingFieldError('shortId', "missing 'shortId' in path")
        return cls(short_id=short_id)
