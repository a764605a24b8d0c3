"""API Gateway (Lambda proxy) response builders.

Every response is JSON-encoded and carries permissive CORS headers so the
note editor's web frontend can call the share endpoints from its own origin.

Error bodies follow one shape:

    {"message": "<human readable>", "errorCode": "<stable code>"}

500 responses never include exception text.
"""

import json
from typing import Any

from sharelinks.types import LambdaResponse


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,DELETE',
}


def json_response(status_code: int, body: dict[str, Any]) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps(body),
    }


def error_body(message: str, error_code: str | None = None) -> dict[str, Any]:
    body = {'message': message}
    if error_code:
        body['errorCode'] = error_code
    return body


def response_200(body: dict[str, Any]) -> LambdaResponse:
    return json_response(200, body)


def response_201(body: dict[str, Any]) -> LambdaResponse:
    return json_response(201, body)


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    return json_response(400, error_body(base if not message else f'{base} ({message})', error_code))


def response_404(message: str, error_code: str | None = None) -> LambdaResponse:
    return json_response(404, error_body(message, error_code))


def response_410(message: str, error_code: str | None = None) -> LambdaResponse:
    return json_response(410, error_body(message, error_code))


def response_500(error_code: str | None = None) -> LambdaResponse:
    return json_response(500, error_body('Internal Server Error', error_code))
