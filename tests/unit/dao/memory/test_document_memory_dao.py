import pytest

from sharelinks.models import DocumentModel
from sharelinks.dao.exceptions import DocumentDoesNotExistError
from sharelinks.dao.memory import DocumentMemoryDAO


def test_get_seeded_document():
    document = DocumentModel(id='doc-1', title='Groceries')
    dao = DocumentMemoryDAO([document])

    assert dao.get('doc-1') == document


def test_add_and_remove_document():
    dao = DocumentMemoryDAO()
    dao.add(DocumentModel(id='doc-1'))
    dao.remove('doc-1')
    dao.remove('doc-1')

    with pytest.raises(DocumentDoesNotExistError, match="Document with ID 'doc-1' does not exist."):
        dao.get('doc-1')
