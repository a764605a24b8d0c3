import json
import base64

import pytest

from sharelinks.exceptions import InvalidRequestError
from sharelinks.lambdas.create_share.request import CreateShareRequest


@pytest.mark.parametrize(
    'body, expected',
    [
        ({'documentId': 'doc-1'}, CreateShareRequest('doc-1')),
        ({'documentId': ' doc-1 ', 'expiresInSeconds': None}, CreateShareRequest('doc-1')),
        ({'documentId': 'doc-1', 'expiresInSeconds': 3600}, CreateShareRequest('doc-1', 3600)),
        ({'documentId': 'doc-1', 'expiresInSeconds': 0.5}, CreateShareRequest('doc-1', 0.5)),
        ({'documentId': 'doc-1', 'expiresInSeconds': -5}, CreateShareRequest('doc-1', -5)),
        ({'noteId': 'doc-1'}, CreateShareRequest('doc-1')),
        ({'documentId': 'doc-1', 'noteId': 'doc-2'}, CreateShareRequest('doc-1')),
    ],
)
def test_valid_requests(body: dict, expected: CreateShareRequest):
    assert CreateShareRequest.from_event({'body': json.dumps(body)}) == expected


def test_base64_encoded_body():
    encoded = base64.b64encode(json.dumps({'documentId': 'doc-1'}).encode('utf-8')).decode('ascii')
    request = CreateShareRequest.from_event({'body': encoded, 'isBase64Encoded': True})
    assert request.document_id == 'doc-1'


@pytest.mark.parametrize(
    'raw_body, error_code',
    [
        ('{"documentId": ', 'INVALID_JSON_BODY'),
        ('["doc-1"]', 'INVALID_JSON_BODY'),
        (None, 'MISSING_DOCUMENT_ID'),
        ('{}', 'MISSING_DOCUMENT_ID'),
        ('{"documentId": "   "}', 'MISSING_DOCUMENT_ID'),
        ('{"documentId": 42}', 'MISSING_DOCUMENT_ID'),
        ('{"documentId": "doc-1", "expiresInSeconds": "3600"}', 'INVALID_EXPIRES_IN_SECONDS'),
        ('{"documentId": "doc-1", "expiresInSeconds": true}', 'INVALID_EXPIRES_IN_SECONDS'),
        ('{"documentId": "doc-1", "expiresInSeconds": Infinity}', 'INVALID_EXPIRES_IN_SECONDS'),
        ('{"documentId": "doc-1", "expiresInSeconds": NaN}', 'INVALID_EXPIRES_IN_SECONDS'),
    ],
)
def test_invalid_requests(raw_body: str | None, error_code: str):
    with pytest.raises(InvalidRequestError) as exc_info:
        CreateShareRequest.from_event({'body': raw_body})

    assert exc_info.value.error_code == error_code
