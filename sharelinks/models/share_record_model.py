from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class AccessMode(StrEnum):
    """Access granted by a share token.

    Only read-only access exists; it is an enum rather than a flag so the
    stored records and the wire format name the mode explicitly.
    """

    READ_ONLY = 'read_only'


@dataclass(frozen=True)
class ShareRecordModel:
    """Represent a persisted share token -> document binding.

    Attributes:
        token (str):
            Unique, URL-safe, unguessable identifier of the share. Primary key.
        document_id (str):
            Opaque reference to the shared document (owned by the document store).
        created_at (datetime):
            Timezone-aware UTC creation instant. Never changes.
        expires_at (datetime | None):
            Timezone-aware UTC instant from which the link is expired.
            None if the link never expires.
        access_mode (AccessMode):
            Access granted to whoever holds the token.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime(2026, 1, 1, tzinfo=UTC)
        >>> record = ShareRecordModel(
        ...     token='Zk3u9QwErTy0pLmN_aB-cD12',
        ...     document_id='doc-1',
        ...     created_at=now,
        ...     expires_at=now + timedelta(hours=1),
        ... )
        >>> record.is_expired(now)
        False
        >>> record.is_expired(now + timedelta(hours=1))
        True
    """

    token: str
    document_id: str
    created_at: datetime
    expires_at: datetime | None = None
    access_mode: AccessMode = AccessMode.READ_ONLY

    def is_expired(self, now: datetime) -> bool:
        """Return True if the link is expired at the given instant."""
        return self.expires_at is not None and now >= self.expires_at
