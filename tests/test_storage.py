"""
Tests for link stores.
The same contract is checked against the SQLAlchemy and in-memory stores.
"""
from datetime import datetime, timezone

import pytest

from shorty.exceptions import DuplicateUrl
from shorty.models.url import ShortLink
from shorty.storage.factory import LinkStoreFactory, LinkStoreBackend
from shorty.storage.strategies import InMemoryLinkStore, SQLAlchemyLinkStore

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(params=["sqlalchemy", "memory"])
def store(request, db_session):
    if request.param == "sqlalchemy":
        return SQLAlchemyLinkStore(db_session)
    return InMemoryLinkStore()


class TestLinkStoreContract:
    """Behaviour every store must share"""

    def test_insert_assigns_increasing_ids(self, store):
        first = store.insert("https://example.com/a", NOW)
        second = store.insert("https://example.com/b", NOW)
        assert first >= 1
        assert second > first

    def test_find_by_url(self, store):
        link_id = store.insert("https://example.com/a", NOW)
        record = store.find_by_url("https://example.com/a")
        assert record is not None
        assert record.id == link_id
        assert record.url == "https://example.com/a"
        assert record.hits == 0
        assert record.accessed is None

    def test_find_by_url_is_exact(self, store):
        store.insert("https://example.com/a", NOW)
        assert store.find_by_url("https://example.com/a/") is None
        assert store.find_by_url("HTTPS://example.com/a") is None

    def test_find_by_id(self, store):
        link_id = store.insert("https://example.com/a", NOW)
        assert store.find_by_id(link_id).url == "https://example.com/a"
        assert store.find_by_id(link_id + 100) is None

    def test_duplicate_url(self, store):
        store.insert("https://example.com/a", NOW)
        with pytest.raises(DuplicateUrl):
            store.insert("https://example.com/a", NOW)
        # The losing insert must not disturb later lookups
        assert store.find_by_url("https://example.com/a") is not None

    def test_record_hit(self, store):
        link_id = store.insert("https://example.com/a", NOW)
        store.record_hit(link_id, NOW)
        store.record_hit(link_id, NOW)
        record = store.find_by_id(link_id)
        assert record.hits == 2
        assert record.accessed is not None

    def test_record_hit_for_missing_id_is_noop(self, store):
        store.record_hit(999, NOW)
        assert store.find_by_id(999) is None


class TestSQLAlchemyLinkStore:
    """SQLAlchemy-specific behaviour"""

    def test_rows_land_in_urls_table(self, sql_store, db_session):
        link_id = sql_store.insert("https://example.com/a", NOW)
        row = db_session.get(ShortLink, link_id)
        assert row.url == "https://example.com/a"
        assert row.hits == 0

    def test_out_of_range_id(self, sql_store):
        assert sql_store.find_by_id(2 ** 70) is None
        assert sql_store.find_by_id(-1) is None
        sql_store.record_hit(2 ** 70, NOW)


class TestLinkStoreFactory:
    """Test store factory"""

    def test_sqlalchemy_needs_session(self):
        with pytest.raises(ValueError):
            LinkStoreFactory.create(LinkStoreBackend.SQLALCHEMY)

    def test_sqlalchemy_store(self, db_session):
        store = LinkStoreFactory.create(LinkStoreBackend.SQLALCHEMY, db_session)
        assert isinstance(store, SQLAlchemyLinkStore)

    def test_memory_store_is_singleton(self, memory_store):
        first = LinkStoreFactory.create(LinkStoreBackend.MEMORY)
        second = LinkStoreFactory.create(LinkStoreBackend.MEMORY)
        assert isinstance(first, InMemoryLinkStore)
        assert first is second
