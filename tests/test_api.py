"""
Tests for the catalog HTTP API.
"""
import logging

import pytest
from fastapi.testclient import TestClient

from bookcatalog.main import create_app
from bookcatalog.settings import Settings
from bookcatalog.storage import CatalogStore


def _settings(**overrides):
    settings = Settings()
    settings.DISPLAY_STYLE = "standard"
    settings.SEED_SAMPLE = False
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store, settings=_settings()))


def _add(client, identifier="123", title="Title", author="Author"):
    return client.post(
        "/api/catalog/books",
        json={"title": title, "author": author, "identifier": identifier},
    )


def test_health_check(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_add_and_get_book(client, store):
    resp = _add(client)

    assert resp.status_code == 200
    assert resp.json() == {"identifier": "123", "title": "Title", "author": "Author"}
    assert client.get("/api/catalog/books/123").json()["title"] == "Title"
    assert store.get("123") is not None


def test_get_missing_book_is_404(client):
    assert client.get("/api/catalog/books/none").status_code == 404


def test_add_with_missing_fields_is_400(client, store):
    resp = client.post("/api/catalog/books", json={"title": "Only"})

    assert resp.status_code == 400
    assert "author" in resp.json()["detail"]
    assert "identifier" in resp.json()["detail"]
    assert len(store) == 0


def test_listing_and_search(client):
    _add(client, "1", "Dubliners", "James Joyce")
    _add(client, "2", "Ion", "Liviu Rebreanu")

    everything = client.get("/api/catalog/books").json()
    assert [e["identifier"] for e in everything] == ["1", "2"]
    assert everything[0] == {
        "display_line": "Dubliners by James Joyce (ISBN: 1)",
        "identifier": "1",
        "remove_path": "/api/catalog/books/1",
    }

    found = client.get("/api/catalog/books", params={"q": "JOYCE"}).json()
    assert [e["identifier"] for e in found] == ["1"]


def test_remove_via_listing_path(client, store):
    _add(client, "1")
    entry = client.get("/api/catalog/books").json()[0]

    resp = client.delete(entry["remove_path"])

    assert resp.json() == {"status": "ok", "removed": True}
    assert store.get("1") is None
    assert client.delete("/api/catalog/books/1").json()["removed"] is False


def test_clear_all(client, store):
    _add(client, "1")
    _add(client, "2")

    assert client.delete("/api/catalog/books").json() == {"status": "ok"}
    assert len(store) == 0


def test_text_commands(client, store):
    resp = client.post("/api/catalog/commands", json={"line": "add Title Author 123"})
    assert resp.json() == {"status": "ok", "command": "AddRecordCommand"}
    assert store.get("123").author == "Author"

    resp = client.post("/api/catalog/commands", json={"line": "remove 123"})
    assert resp.json()["command"] == "RemoveRecordCommand"
    assert store.get("123") is None


@pytest.mark.parametrize("line", ["add OnlyTitle", "bogus 1 2 3"])
def test_bad_text_commands_are_400(client, store, line):
    resp = client.post("/api/catalog/commands", json={"line": line})

    assert resp.status_code == 400
    assert len(store) == 0


def test_special_display_style(store):
    client = TestClient(create_app(store=store, settings=_settings(DISPLAY_STYLE="special")))
    _add(client, "1", "Dubliners", "James Joyce")

    line = client.get("/api/catalog/books").json()[0]["display_line"]
    assert line == "Special: Dubliners by James Joyce (ISBN: 1)"


def test_seed_sample(store):
    TestClient(create_app(store=store, settings=_settings(SEED_SAMPLE=True)))

    assert store.get("1234567890").author == "Camelia Cavadia"
    assert store.get("0987654321").title == "Oamenii_din_Dublin"


def test_apps_do_not_share_stores():
    first = TestClient(create_app(settings=_settings()))
    second = TestClient(create_app(settings=_settings()))
    _add(first, "1")

    assert second.get("/api/catalog/books/1").status_code == 404


@pytest.mark.parametrize("identifier", ["978/0", "a?b", "x#1", "50%", "with space"])
def test_listing_paths_reach_records_with_reserved_characters(client, store, identifier):
    assert _add(client, identifier).status_code == 200
    entry = client.get("/api/catalog/books").json()[0]
    assert entry["identifier"] == identifier

    got = client.get(entry["remove_path"])
    assert got.status_code == 200
    assert got.json()["identifier"] == identifier

    resp = client.delete(entry["remove_path"])
    assert resp.json() == {"status": "ok", "removed": True}
    assert store.get(identifier) is None


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.mark.parametrize("name,expected", [("DEBUG", logging.DEBUG), ("WARNING", logging.WARNING)])
def test_factory_applies_log_level(restore_root_level, name, expected):
    create_app(settings=_settings(LOG_LEVEL=name))

    assert restore_root_level.level == expected


def test_factory_log_level_applies_on_repeated_calls(restore_root_level):
    create_app(settings=_settings(LOG_LEVEL="ERROR"))
    create_app(settings=_settings(LOG_LEVEL="DEBUG"))

    assert restore_root_level.level == logging.DEBUG
