"""Documents as seen by the share-link core.

DocumentModel is what the document store hands over; ReadOnlyDocument is the
projection an unauthenticated viewer receives. The projection copies an
explicit allow-list of fields and nothing else, so fields the document store
adds later (owner, tags, attachments, ...) can never leak through a share.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sharelinks.models.share_record_model import AccessMode
from sharelinks.utils.constants import UNTITLED_DOCUMENT_TITLE
from sharelinks.utils.helpers import isoformat_utc


@dataclass(frozen=True)
class DocumentModel:
    """Represent a document owned by the document store.

    Attributes:
        id (str):
            Document identifier.
        title (str | None):
            Document title, possibly empty.
        content (str | None):
            Document body, possibly empty.
        created_at (datetime | None):
            Creation instant reported by the document store.
        updated_at (datetime | None):
            Last update instant reported by the document store.
        extra (dict[str, Any]):
            Every other field the document store returned. Never exposed to viewers.
    """

    id: str
    title: str | None = None
    content: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class ReadOnlyDocument:
    id: str
    title: str
    content: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_document(cls, document: DocumentModel) -> 'ReadOnlyDocument':
        """Project a document to the fields a share viewer may see."""
        return cls(
            id=document.id,
            title=document.title or UNTITLED_DOCUMENT_TITLE,
            content=document.content or '',
            created_at=document.created_at,
            updated_at=document.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'createdAt': isoformat_utc(self.created_at),
            'updatedAt': isoformat_utc(self.updated_at),
        }


@dataclass(frozen=True)
class SharedDocument:
    """Result of resolving a share token."""

    document: ReadOnlyDocument
    access_mode: AccessMode = AccessMode.READ_ONLY

    def to_dict(self) -> dict[str, Any]:
        return {
            'note': self.document.to_dict(),
            'readOnly': self.access_mode is AccessMode.READ_ONLY,
        }
