"""Read-only access to documents stored by the note editor in Redis

Documents are owned by the note editor; the share-link core only ever reads
them. Each document is a Redis hash:

    <prefix>:documents:<document id> -> {title, content, created_at, updated_at, ...}

Fields other than the known ones are kept in DocumentModel.extra and never
reach a share viewer.
"""

from typing import Any

from beartype import beartype

from sharelinks.models import DocumentModel
from sharelinks.dao.base import DocumentBaseDAO
from sharelinks.dao.redis.mixins import RedisClientMixin
from sharelinks.dao.redis.helpers import handle_redis_errors
from sharelinks.dao.exceptions import DataStoreError, DocumentDoesNotExistError
from sharelinks.utils.helpers import parse_datetime


_KNOWN_FIELDS = frozenset({'id', 'title', 'content', 'created_at', 'updated_at'})


class DocumentRedisDAO(RedisClientMixin, DocumentBaseDAO):
    @handle_redis_errors
    @beartype
    def get(self, document_id: str, **kwargs) -> DocumentModel:
        """Retrieve a document by id

        Raises:
            DocumentDoesNotExistError:
                If no hash is stored under the document key.
            DataStoreError:
                If Redis connectivity issues occur or a timestamp field is malformed.
        """
        fields = self.redis.hgetall(self.keys.document_key(document_id))
        if not fields:
            raise DocumentDoesNotExistError(f"Document with ID '{document_id}' does not exist.")
        return self._to_model(document_id, fields)

    @staticmethod
    def _to_model(document_id: str, fields: dict[str, Any]) -> DocumentModel:
        try:
            created_at = parse_datetime(fields.get('created_at'))
            updated_at = parse_datetime(fields.get('updated_at'))
        except ValueError as e:
            raise DataStoreError(f"Corrupted timestamps in document '{document_id}'.") from e

        return DocumentModel(
            id=document_id,
            title=fields.get('title'),
            content=fields.get('content'),
            created_at=created_at,
            updated_at=updated_at,
            extra={k: v for k, v in fields.items() if k not in _KNOWN_FIELDS},
        )
