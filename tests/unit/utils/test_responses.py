import json

import pytest

from sharelinks.utils.responses import (
    CORS_HEADERS,
    response_200,
    response_201,
    response_400,
    response_404,
    response_410,
    response_500,
)


@pytest.mark.parametrize(
    'response, status_code, body',
    [
        (response_200({'ok': True}), 200, {'ok': True}),
        (response_201({'token': 'abc'}), 201, {'token': 'abc'}),
        (response_400(), 400, {'message': 'Bad Request'}),
        (response_400('missing x', 'MISSING_X'), 400, {'message': 'Bad Request (missing x)', 'errorCode': 'MISSING_X'}),
        (response_404('Share link not found', 'SHARE_NOT_FOUND'), 404, {'message': 'Share link not found', 'errorCode': 'SHARE_NOT_FOUND'}),
        (response_410('Link has expired', 'LINK_EXPIRED'), 410, {'message': 'Link has expired', 'errorCode': 'LINK_EXPIRED'}),
        (response_500(), 500, {'message': 'Internal Server Error'}),
    ],
)
def test_responses(response: dict, status_code: int, body: dict):
    assert response['statusCode'] == status_code
    assert json.loads(response['body']) == body
    assert response['headers'] == {'Content-Type': 'application/json', **CORS_HEADERS}
