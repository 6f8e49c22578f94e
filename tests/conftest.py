import pytest

from bookcatalog.models import RecordBuilder
from bookcatalog.storage import CatalogStore


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def make_record():
    def _make(identifier="123", title="Title", author="Author"):
        return RecordBuilder().title(title).author(author).identifier(identifier).build()

    return _make
