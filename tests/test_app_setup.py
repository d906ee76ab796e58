"""
Tests for application wiring: settings, response rendering and error handlers.
"""
from fastapi.testclient import TestClient

from library_api.catalog.store import CatalogStore
from library_api.config import Settings
from library_api.errors import BookNotFound, MissingParameter
from library_api.main import create_app


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("SEED_CATALOG", "no")
    monkeypatch.setenv("INDENT_JSON", "0")
    s = Settings.from_env()
    assert s.port == 9090
    assert s.host == "0.0.0.0"
    assert s.seed_catalog is False
    assert s.indent_json is False


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "SEED_CATALOG", "INDENT_JSON", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert (s.host, s.port) == ("localhost", 8080)
    assert s.seed_catalog is True
    assert s.indent_json is True


def test_unseeded_app_starts_empty():
    client = TestClient(create_app(Settings(seed_catalog=False)))
    assert client.get("/books").json() == []


def test_apps_do_not_share_catalogs():
    first = TestClient(create_app(Settings()))
    second = TestClient(create_app(Settings()))
    first.delete("/books/1")
    assert second.get("/books/1").status_code == 200


def test_responses_are_indented_by_default(client):
    resp = client.get("/books/1")
    assert resp.text.startswith('{\n    "id": "1"')


def test_error_payloads_follow_indentation_setting():
    compact = TestClient(create_app(Settings(indent_json=False)))
    resp = compact.get("/books/missing")
    assert resp.text == '{"message":"Book not found."}'


def test_error_messages_default_and_override():
    assert BookNotFound().message == "Book not found."
    assert BookNotFound().status_code == 404
    err = MissingParameter("Missing search query.")
    assert err.message == "Missing search query."
    assert str(err) == "Missing search query."
    assert err.status_code == 400


class ExplodingStore(CatalogStore):
    def list_books(self):
        raise RuntimeError("boom")


def test_unexpected_errors_become_500():
    app = create_app(Settings(), catalog=ExplodingStore())
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/books")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error."}
