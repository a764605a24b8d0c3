from sharelinks.dao.base.share_record_base_dao import ShareRecordBaseDAO
from sharelinks.dao.base.document_base_dao import DocumentBaseDAO


__all__ = [
    'ShareRecordBaseDAO',
    'DocumentBaseDAO',
]
