"""Abstract base class for ShareRecord data access objects (DAOs).

This class establishes a consistent contract for all ShareRecord DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, in-memory, PostgreSQL).

Responsibilities:
    - Provide an interface for inserting, retrieving and deleting ShareRecordModel objects.
    - Enforce token uniqueness: an insert never overwrites an existing record.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, UTC
        >>> from sharelinks.models import ShareRecordModel
        >>> from sharelinks.dao.redis import ShareRecordRedisDAO

        >>> dao = ShareRecordRedisDAO(...)

        >>> record = ShareRecordModel(
        ...     token='Zk3u9QwErTy0pLmN_aB-cD12',
        ...     document_id='doc-1',
        ...     created_at=datetime.now(UTC),
        ... )
        >>> dao.insert(record)

        >>> dao.get('Zk3u9QwErTy0pLmN_aB-cD12').document_id
        'doc-1'

        >>> dao.delete('Zk3u9QwErTy0pLmN_aB-cD12')
        >>> dao.delete('Zk3u9QwErTy0pLmN_aB-cD12')  # idempotent
"""

from abc import ABC, abstractmethod
from datetime import datetime

from sharelinks.models import ShareRecordModel


class ShareRecordBaseDAO(ABC):
    """Interface for ShareRecord data access objects (DAOs).

    Methods:
        insert(record: ShareRecordModel, **kwargs) -> ShareRecordBaseDAO:
            Insert a new ShareRecordModel into the data store.
            Raises ShareRecordAlreadyExistsError if the token already exists.
            Raises DataStoreError on connection or write failure.

        get(token: str, **kwargs) -> ShareRecordModel:
            Retrieve a ShareRecordModel from the data store by token.
            Raises ShareRecordNotFoundError if the record does not exist.
            Raises DataStoreError on connection or read failure.

        delete(token: str, **kwargs) -> None:
            Delete a ShareRecordModel by token. Succeeds if it does not exist.
            Raises DataStoreError on connection or write failure.

        list_by_document(document_id: str, **kwargs) -> list[ShareRecordModel]:
            Retrieve every stored record of a document, oldest first.
            Raises DataStoreError on connection or read failure.

        purge_expired(now: datetime, **kwargs) -> int:
            Delete every record expired at `now` and return how many were deleted.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShareRecordRedisDAO or
        ShareRecordMemoryDAO) must extend this class and implement all
        abstract methods. Per-token operations must be atomic with respect
        to each other: two concurrent inserts of the same token must never
        both succeed.

    NOTE:
        - The DAO stores expired records like any other record. Deciding
          whether a record is expired is the caller's job (see
          ShareRecordModel.is_expired()).
    """

    @abstractmethod
    def insert(self, record: ShareRecordModel, **kwargs) -> 'ShareRecordBaseDAO':
        """Insert a new ShareRecordModel into the data store.

        Args:
            record (ShareRecordModel):
                The ShareRecordModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShareRecordBaseDAO: self (for method chaining)

        Raises:
            ShareRecordAlreadyExistsError:
                If a ShareRecordModel with the same token already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, token: str, **kwargs) -> ShareRecordModel:
        """Retrieve a ShareRecordModel from the data store by its token.

        Args:
            token (str):
                The token of the ShareRecordModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShareRecordModel: The stored record, expired or not.

        Raises:
            ShareRecordNotFoundError:
                If no ShareRecordModel with the given token exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, token: str, **kwargs) -> None:
        """Delete a ShareRecordModel from the data store by its token.

        Deleting a token which doesn't exist is not an error.

        Args:
            token (str):
                The token of the ShareRecordModel to be deleted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list_by_document(self, document_id: str, **kwargs) -> list[ShareRecordModel]:
        """Retrieve every stored ShareRecordModel of a document, oldest first.

        Args:
            document_id (str):
                Identifier of the shared document.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[ShareRecordModel]: Stored records (possibly expired), sorted by created_at.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def purge_expired(self, now: datetime, **kwargs) -> int:
        """Delete every ShareRecordModel expired at the given instant.

        Args:
            now (datetime):
                Instant the expiry of each record is evaluated against.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: Number of deleted records.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
