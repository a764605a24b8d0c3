import json
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from sharelinks.types import LambdaEvent, LambdaConfiguration
from sharelinks.lambdas.revoke_share import app
from sharelinks.models import ShareRecordModel
from sharelinks.dao.memory import ShareRecordMemoryDAO, DocumentMemoryDAO
from sharelinks.dao.exceptions import DataStoreError, ShareRecordNotFoundError


TOKEN = 'Zk3u9QwErTy0pLmN_aB-cD12'


class TestRevokeShareHandler:
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

    def revoke_event(self, path_parameters: dict | None) -> LambdaEvent:
        return self.make_event('DELETE', '/share/{token}', f'/share/{TOKEN}', path_parameters=path_parameters)

    def test_lambda_handler(self) -> None:
        self.share_dao.insert(ShareRecordModel(token=TOKEN, document_id='doc-1', created_at=datetime.now(UTC)))

        response = app.lambda_handler(self.revoke_event({'token': TOKEN}), None)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'message': 'Share link revoked'}
        with pytest.raises(ShareRecordNotFoundError):
            self.share_dao.get(TOKEN)

    @pytest.mark.parametrize('token', [TOKEN, 'not-a-token'])
    def test_lambda_handler_is_idempotent(self, token: str) -> None:
        first = app.lambda_handler(self.revoke_event({'token': token}), None)
        second = app.lambda_handler(self.revoke_event({'token': token}), None)

        assert first['statusCode'] == second['statusCode'] == 200
        assert first['body'] == second['body']

    def test_lambda_handler_with_expired_link(self) -> None:
        created_at = datetime.now(UTC) - timedelta(hours=2)
        self.share_dao.insert(ShareRecordModel(token=TOKEN, document_id='doc-1', created_at=created_at, expires_at=created_at + timedelta(hours=1)))

        response = app.lambda_handler(self.revoke_event({'token': TOKEN}), None)

        assert response['statusCode'] == 200
        assert len(self.share_dao) == 0

    @pytest.mark.parametrize('path_parameters', [None, {'documentId': 'doc-1'}])
    def test_lambda_handler_with_missing_token(self, path_parameters) -> None:
        response = app.lambda_handler(self.revoke_event(path_parameters), None)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'MISSING_TOKEN'

    def test_lambda_handler_with_unreachable_store(self, monkeypatch: MonkeyPatch) -> None:
        failing_dao = MagicMock()
        failing_dao.delete.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")
        monkeypatch.setattr(app, 'ShareRecordRedisDAO', lambda *a, **kw: failing_dao)

        response = app.lambda_handler(self.revoke_event({'token': TOKEN}), None)

        assert response['statusCode'] == 500
        assert json.loads(response['body']) == {'message': 'Internal Server Error', 'errorCode': 'SHARE_STORE_UNAVAILABLE'}
