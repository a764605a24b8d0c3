from sharelinks.dao.memory.share_record_memory_dao import ShareRecordMemoryDAO
from sharelinks.dao.memory.document_memory_dao import DocumentMemoryDAO


__all__ = [
    'ShareRecordMemoryDAO',
    'DocumentMemoryDAO',
]
