"""Validated body of POST /share

Example:
    >>> CreateShareRequest.from_event({'body': '{"documentId": "doc-1", "expiresInSeconds": 3600}'})
    CreateShareRequest(document_id='doc-1', expires_in_seconds=3600)
"""

import json
import math
import base64
import binascii
from dataclasses import dataclass

from sharelinks.types import LambdaEvent
from sharelinks.exceptions import InvalidRequestError
from sharelinks.lambdas.create_share.constants import (
    INVALID_JSON_BODY,
    MISSING_DOCUMENT_ID,
    INVALID_EXPIRES_IN_SECONDS,
)


@dataclass(frozen=True)
class CreateShareRequest:
    document_id: str
    expires_in_seconds: int | float | None = None

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'CreateShareRequest':
        """Parse and validate the JSON body of an API Gateway proxy event

        Accepted body:
            documentId (str):            required, non-blank ('noteId' is accepted as an alias)
            expiresInSeconds (number):   optional, null or absent for a link which never expires

        Raises:
            InvalidRequestError: with error_code INVALID_JSON_BODY, MISSING_DOCUMENT_ID
                                 or INVALID_EXPIRES_IN_SECONDS.
        """
        raw = event.get('body') or '{}'
        try:
            if event.get('isBase64Encoded'):
                raw = base64.b64decode(raw).decode('utf-8')
            body = json.loads(raw)
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidRequestError('invalid JSON body', error_code=INVALID_JSON_BODY) from e

        if not isinstance(body, dict):
            raise InvalidRequestError('JSON body must be an object', error_code=INVALID_JSON_BODY)

        document_id = body.get('documentId', body.get('noteId'))
        if not isinstance(document_id, str) or not document_id.strip():
            raise InvalidRequestError("missing 'documentId' in JSON body", error_code=MISSING_DOCUMENT_ID)

        expires_in_seconds = body.get('expiresInSeconds')
        if expires_in_seconds is not None:
            # bool is an int subclass; JSON true/false is not a duration
            if isinstance(expires_in_seconds, bool) or not isinstance(expires_in_seconds, (int, float)):
                raise InvalidRequestError("'expiresInSeconds' must be a number or null", error_code=INVALID_EXPIRES_IN_SECONDS)
            if isinstance(expires_in_seconds, float) and not math.isfinite(expires_in_seconds):
                raise InvalidRequestError("'expiresInSeconds' must be finite", error_code=INVALID_EXPIRES_IN_SECONDS)

        return cls(document_id=document_id.strip(), expires_in_seconds=expires_in_seconds)
