"""Abstract base class for document data access objects (DAOs).

Documents belong to the note editor; the share-link core only ever reads
them by identifier. Implementations adapt whatever storage the editor uses
to this single read operation.
"""

from abc import ABC, abstractmethod

from sharelinks.models import DocumentModel


class DocumentBaseDAO(ABC):
    """Read-only interface to the document store.

    Methods:
        get(document_id: str, **kwargs) -> DocumentModel:
            Retrieve a document by identifier.
            Raises DocumentDoesNotExistError if the document does not exist.
            Raises DataStoreError on connection or read failure.
    """

    @abstractmethod
    def get(self, document_id: str, **kwargs) -> DocumentModel:
        """Retrieve a document by its identifier.

        Args:
            document_id (str):
                Identifier of the document.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            DocumentModel: The document, including fields unknown to this core in `extra`.

        Raises:
            DocumentDoesNotExistError:
                If no document with the given identifier exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
