from sharelinks.dao.base import ShareRecordBaseDAO, DocumentBaseDAO
from sharelinks.dao.exceptions import (
    DAOError,
    ShareRecordNotFoundError,
    ShareRecordAlreadyExistsError,
    DocumentDoesNotExistError,
    DataStoreError,
)


__all__ = [
    'ShareRecordBaseDAO',
    'DocumentBaseDAO',
    'DAOError',
    'ShareRecordNotFoundError',
    'ShareRecordAlreadyExistsError',
    'DocumentDoesNotExistError',
    'DataStoreError',
]
