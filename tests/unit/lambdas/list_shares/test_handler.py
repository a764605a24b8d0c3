import json
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from sharelinks.types import LambdaEvent, LambdaConfiguration
from sharelinks.lambdas.list_shares import app
from sharelinks.models import ShareRecordModel
from sharelinks.dao.memory import ShareRecordMemoryDAO, DocumentMemoryDAO
from sharelinks.dao.exceptions import DataStoreError


class TestListSharesHandler:
    @pytest.fixture(autouse=True)
    def setup(
        self,
        monkeypatch: MonkeyPatch,
        config: LambdaConfiguration,
        share_dao: ShareRecordMemoryDAO,
        document_dao: DocumentMemoryDAO,
        make_event,
    ) -> None:
        # Patch Lambda dependencies
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
        monkeypatch.setattr(app, 'ShareRecordRedisDAO', lambda *a, **kw: share_dao)
        monkeypatch.setattr(app, 'DocumentRedisDAO', lambda *a, **kw: document_dao)

        self.share_dao = share_dao
        self.make_event = make_event

    def list_event(self, path_parameters: dict | None) -> LambdaEvent:
        return self.make_event('GET', '/documents/{documentId}/shares', '/documents/doc-2/shares', path_parameters=path_parameters)

    def test_lambda_handler(self) -> None:
        created_at = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
        far_future = datetime.now(UTC) + timedelta(days=365)
        self.share_dao.insert(ShareRecordModel(token='liveTokenLiveToken02', document_id='doc-2', created_at=created_at + timedelta(seconds=1)))
        self.share_dao.insert(ShareRecordModel(token='liveTokenLiveToken01', document_id='doc-2', created_at=created_at, expires_at=far_future))
        self.share_dao.insert(ShareRecordModel(token='deadTokenDeadToken00', document_id='doc-2', created_at=created_at, expires_at=created_at))
        self.share_dao.insert(ShareRecordModel(token='otherDocumentToken00', document_id='doc-1', created_at=created_at))

        response = app.lambda_handler(self.list_event({'documentId': 'doc-2'}), None)
        body = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert body['documentId'] == 'doc-2'
        assert [share['token'] for share in body['shares']] == ['liveTokenLiveToken01', 'liveTokenLiveToken02']
        assert body['shares'][1] == {
            'url': 'https://testhost:1000/s/liveTokenLiveToken02',
            'token': 'liveTokenLiveToken02',
            'expiresAt': None,
            'createdAt': '2025-10-15T12:00:01.000Z',
            'accessMode': 'read_only',
        }

    def test_lambda_handler_without_shares(self) -> None:
        response = app.lambda_handler(self.list_event({'documentId': 'doc-2'}), None)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'documentId': 'doc-2', 'shares': []}

    @pytest.mark.parametrize('path_parameters', [None, {}, {'documentId': '  '}])
    def test_lambda_handler_with_missing_document_id(self, path_parameters) -> None:
        response = app.lambda_handler(self.list_event(path_parameters), None)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body == {'message': "Bad Request (missing 'documentId' in path)", 'errorCode': 'MISSING_DOCUMENT_ID'}

    def test_lambda_handler_with_unreachable_store(self, monkeypatch: MonkeyPatch) -> None:
        failing_dao = MagicMock()
        failing_dao.list_by_document.side_effect = DataStoreError('boom')
        monkeypatch.setattr(app, 'ShareRecordRedisDAO', lambda *a, **kw: failing_dao)

        response = app.lambda_handler(self.list_event({'documentId': 'doc-2'}), None)

        assert response['statusCode'] == 500
        assert json.loads(response['body'])['errorCode'] == 'SHARE_STORE_UNAVAILABLE'
