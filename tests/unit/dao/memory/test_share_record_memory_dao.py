from datetime import datetime, timedelta, UTC
from concurrent.futures import ThreadPoolExecutor

import pytest

from sharelinks.models import ShareRecordModel
from sharelinks.dao.exceptions import ShareRecordAlreadyExistsError, ShareRecordNotFoundError
from sharelinks.dao.memory import ShareRecordMemoryDAO


NOW = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


def make_record(token: str, document_id: str = 'doc-1', created_at: datetime = NOW, expires_at: datetime | None = None) -> ShareRecordModel:
    return ShareRecordModel(token=token, document_id=document_id, created_at=created_at, expires_at=expires_at)


class TestShareRecordMemoryDAO:
    @pytest.fixture
    def dao(self) -> ShareRecordMemoryDAO:
        return ShareRecordMemoryDAO()

    def test_insert_and_get(self, dao: ShareRecordMemoryDAO):
        record = make_record('tokenA')

        assert dao.insert(record) is dao
        assert dao.get('tokenA') == record

    def test_insert_never_overwrites(self, dao: ShareRecordMemoryDAO):
        original = make_record('tokenA', document_id='doc-1')
        dao.insert(original)

        with pytest.raises(ShareRecordAlreadyExistsError):
            dao.insert(make_record('tokenA', document_id='doc-2'))

        assert dao.get('tokenA') == original

    def test_concurrent_inserts_of_the_same_token(self, dao: ShareRecordMemoryDAO):
        def attempt(document_id: str) -> bool:
            try:
                dao.insert(make_record('contested', document_id=document_id))
            except ShareRecordAlreadyExistsError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(attempt, [f'doc-{i}' for i in range(32)]))

        assert outcomes.count(True) == 1
        assert len(dao) == 1

    def test_get_missing_record(self, dao: ShareRecordMemoryDAO):
        with pytest.raises(ShareRecordNotFoundError):
            dao.get('missing')

    def test_delete_is_idempotent(self, dao: ShareRecordMemoryDAO):
        dao.insert(make_record('tokenA'))

        dao.delete('tokenA')
        dao.delete('tokenA')
        dao.delete('never-existed')

        with pytest.raises(ShareRecordNotFoundError):
            dao.get('tokenA')

    def test_list_by_document_is_oldest_first(self, dao: ShareRecordMemoryDAO):
        dao.insert(make_record('newer', created_at=NOW + timedelta(minutes=5)))
        dao.insert(make_record('older', created_at=NOW))
        dao.insert(make_record('other', document_id='doc-2'))

        assert [record.token for record in dao.list_by_document('doc-1')] == ['older', 'newer']
        assert dao.list_by_document('doc-3') == []

    def test_purge_expired(self, dao: ShareRecordMemoryDAO):
        dao.insert(make_record('expired', expires_at=NOW))
        dao.insert(make_record('live', expires_at=NOW + timedelta(seconds=1)))
        dao.insert(make_record('forever'))

        assert dao.purge_expired(NOW) == 1
        assert sorted(record.token for record in dao.list_by_document('doc-1')) == ['forever', 'live']
