"""In-process implementation of ShareRecordBaseDAO

Records live in a dict guarded by a lock, so concurrent inserts of the same
token are serialized the way SET NX serializes them in Redis. Useful for
local development and as the store behind unit tests; not shared between
processes.
"""

import threading
from datetime import datetime

from sharelinks.models import ShareRecordModel
from sharelinks.dao.base import ShareRecordBaseDAO
from sharelinks.dao.exceptions import ShareRecordAlreadyExistsError, ShareRecordNotFoundError
from sharelinks.utils.helpers import token_fingerprint


class ShareRecordMemoryDAO(ShareRecordBaseDAO):
    def __init__(self):
        self._records: dict[str, ShareRecordModel] = {}
        self._lock = threading.Lock()

    def insert(self, record: ShareRecordModel, **kwargs) -> 'ShareRecordMemoryDAO':
        with self._lock:
            if record.token in self._records:
                raise ShareRecordAlreadyExistsError(f'Share record with token fingerprint {token_fingerprint(record.token)} already exists.')
            self._records[record.token] = record
        return self

    def get(self, token: str, **kwargs) -> ShareRecordModel:
        with self._lock:
            try:
                return self._records[token]
            except KeyError:
                raise ShareRecordNotFoundError(f'Share record with token fingerprint {token_fingerprint(token)} not found.') from None

    def delete(self, token: str, **kwargs) -> None:
        with self._lock:
            self._records.pop(token, None)

    def list_by_document(self, document_id: str, **kwargs) -> list[ShareRecordModel]:
        with self._lock:
            records = [record for record in self._records.values() if record.document_id == document_id]
        return sorted(records, key=lambda record: record.created_at)

    def purge_expired(self, now: datetime, **kwargs) -> int:
        with self._lock:
            expired = [token for token, record in self._records.items() if record.is_expired(now)]
            for token in expired:
                del self._records[token]
        return len(expired)

    def __len__(self) -> int:
        return len(self._records)
