import threading

from sharelinks.models import DocumentModel
from sharelinks.dao.base import DocumentBaseDAO
from sharelinks.dao.exceptions import DocumentDoesNotExistError


class DocumentMemoryDAO(DocumentBaseDAO):
    """In-process document store, seeded through add() and remove()"""

    def __init__(self, documents: list[DocumentModel] | None = None):
        self._documents: dict[str, DocumentModel] = {}
        self._lock = threading.Lock()
        for document in documents or []:
            self.add(document)

    def add(self, document: DocumentModel) -> 'DocumentMemoryDAO':
        with self._lock:
            self._documents[document.id] = document
        return self

    def remove(self, document_id: str) -> None:
        with self._lock:
            self._documents.pop(document_id, None)

    def get(self, document_id: str, **kwargs) -> DocumentModel:
        with self._lock:
            try:
                return self._documents[document_id]
            except KeyError:
                raise DocumentDoesNotExistError(f"Document with ID '{document_id}' does not exist.") from None
