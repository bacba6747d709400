"""API Gateway (Lambda proxy) response builders shared by the lambda handlers."""

import json
from typing import Any

from edgelinks.constants import TTL


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def json_response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> dict:
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json;charset=UTF-8',
            **CORS_HEADERS,
            **(headers or {}),
        },
        'body': json.dumps(body),
    }


def error_response(status_code: int, base: str, message: str | None = None, error_code: str | None = None) -> dict:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(status_code, body)


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    return error_response(400, 'Bad Request', message, error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    return error_response(404, 'Not Found', message, error_code)


def response_409(message: str | None = None, error_code: str | None = None) -> dict:
    return error_response(409, 'Conflict', message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    return error_response(500, 'Internal Server Error', message, error_code)


def response_503(message: str | None = None, error_code: str | None = None) -> dict:
    return error_response(503, 'Service Unavailable', message, error_code)


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {
            'Location': location,
            'Cache-Control': f'public, max-age={TTL.REDIRECT_CACHE}',
            **CORS_HEADERS,
        },
        'body': json.dumps({}),  # no body needed for redirects
    }
