from datetime import datetime, timedelta, UTC

import pytest

from sharelinks.models import DocumentModel
from sharelinks.dao.memory import ShareRecordMemoryDAO, DocumentMemoryDAO


class FakeClock:
    """Injectable clock which only moves when told to"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # guarantee_500_response re-raises when running locally; share URLs follow the event's domain
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    monkeypatch.delenv('SHARE_BASE_URL', raising=False)
    monkeypatch.delenv('BASE_URL', raising=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def share_dao() -> ShareRecordMemoryDAO:
    return ShareRecordMemoryDAO()


@pytest.fixture
def document_dao() -> DocumentMemoryDAO:
    return DocumentMemoryDAO(
        [
            DocumentModel(id='doc-1', title='', content=''),
            DocumentModel(
                id='doc-2',
                title='Groceries',
                content='milk, eggs',
                created_at=datetime(2025, 10, 1, 8, 30, 0, tzinfo=UTC),
                updated_at=datetime(2025, 10, 2, 9, 0, 0, tzinfo=UTC),
                extra={'owner_id': 'user-42', 'tags': 'private'},
            ),
        ]
    )
