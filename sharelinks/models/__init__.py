from sharelinks.models.share_record_model import AccessMode, ShareRecordModel
from sharelinks.models.share_link_model import ShareLink
from sharelinks.models.document_model import DocumentModel, ReadOnlyDocument, SharedDocument


__all__ = [
    'AccessMode',
    'ShareRecordModel',
    'ShareLink',
    'DocumentModel',
    'ReadOnlyDocument',
    'SharedDocument',
]
