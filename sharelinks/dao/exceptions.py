"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShareRecordNotFoundError:
        Raised when a ShareRecordModel is not found in the data store.

    ShareRecordAlreadyExistsError:
        Raised when attempting to insert a ShareRecordModel whose token already exists.

    DocumentDoesNotExistError:
        Raised when a document is not found in the document store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, time, OOM, etc.).

Example:
    >>> from sharelinks.dao.exceptions import ShareRecordNotFoundError
    >>> raise ShareRecordNotFoundError("Share record with token 'abc' not found.")
    Traceback (most recent call last):
        ...
    sharelinks.dao.exceptions.ShareRecordNotFoundError: Share record with token 'abc' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShareRecordNotFoundError(DAOError):
    """Raised when a ShareRecordModel is not found in the data store."""

    error_code = 'dao:share_record_not_found_error'


class ShareRecordAlreadyExistsError(DAOError):
    """Raised when inserting a ShareRecordModel whose token already exists in the data store."""

    error_code = 'dao:share_record_already_exists_error'


class DocumentDoesNotExistError(DAOError):
    """Raised when a document is not found in the document store."""

    error_code = 'dao:document_does_not_exist_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'
