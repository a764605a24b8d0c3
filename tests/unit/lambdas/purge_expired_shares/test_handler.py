import json
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from sharelinks.types import LambdaEvent, LambdaConfiguration
from sharelinks.lambdas.purge_expired_shares import app
from sharelinks.models import ShareRecordModel
from sharelinks.dao.memory import ShareRecordMemoryDAO, DocumentMemoryDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import BadConfigurationError


class TestPurgeExpiredShares:
    @pytest.fixture
    def event(self) -> LambdaEvent:
        return {
            'source': 'aws.events',
            'detail-type': 'Scheduled Event',
            'detail': {},
        }

    @pytest.fixture(autouse=True)
    def setup(
        self,
        monkeypatch: MonkeyPatch,
        config: LambdaConfiguration,
        share_dao: ShareRecordMemoryDAO,
        document_dao: DocumentMemoryDAO,
    ) -> None:
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
        monkeypatch.setattr(app, 'ShareRecordRedisDAO', lambda *a, **kw: share_dao)
        monkeypatch.setattr(app, 'DocumentRedisDAO', lambda *a, **kw: document_dao)
        self.share_dao = share_dao

    def test_lambda_handler_purges_expired_shares(self, event: LambdaEvent):
        created_at = datetime.now(UTC) - timedelta(days=2)
        self.share_dao.insert(ShareRecordModel(token='expired-1', document_id='doc-1', created_at=created_at, expires_at=created_at + timedelta(days=1)))
        self.share_dao.insert(ShareRecordModel(token='expired-2', document_id='doc-2', created_at=created_at, expires_at=created_at + timedelta(hours=1)))
        self.share_dao.insert(ShareRecordModel(token='forever', document_id='doc-1', created_at=created_at))

        result = json.loads(app.lambda_handler(event, None))

        assert result == {'status': 'success', 'purged': 2, 'message': 'Successfully purged 2 expired share links'}
        assert len(self.share_dao) == 1

    @pytest.mark.parametrize(
        'patch_target, exception, expected_reason, expected_error',
        [
            ('ShareRecordRedisDAO', DataStoreError("Can't connect to Redis at redis.test:6379/0."), "Can't connect to Redis at redis.test:6379/0.", 'DataStoreError'),
            ('load_config', BadConfigurationError("Missing 'redis' backend"), "Missing 'redis' backend", 'BadConfigurationError'),
        ],
    )
    def test_lambda_handler_reports_errors(
        self,
        monkeypatch: MonkeyPatch,
        event: LambdaEvent,
        patch_target: str,
        exception: Exception,
        expected_reason: str,
        expected_error: str,
    ):
        monkeypatch.setattr(app, patch_target, MagicMock(side_effect=exception))

        result = json.loads(app.lambda_handler(event, None))

        assert result['status'] == 'error'
        assert result['message'] == 'Failed to purge expired share links'
        assert result['reason'] == expected_reason
        assert result['error'] == expected_error

    def test_lambda_handler_hides_store_details_behind_internal_error(self, monkeypatch: MonkeyPatch, event: LambdaEvent):
        failing_dao = MagicMock()
        failing_dao.purge_expired.side_effect = DataStoreError('boom')
        monkeypatch.setattr(app, 'ShareRecordRedisDAO', lambda *a, **kw: failing_dao)

        result = json.loads(app.lambda_handler(event, None))

        assert result['status'] == 'error'
        assert result['error'] == 'InternalError'
        assert result['reason'] == 'Share store unavailable'
