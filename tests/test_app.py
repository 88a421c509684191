"""Tests for application wiring: entry page fallback, lifespan and error handling."""
from fastapi.testclient import TestClient

from profilehub.core.exceptions import InternalError
from profilehub.main import create_app
from profilehub.services.scheduler import PURGE_JOB_ID


def test_unmatched_paths_serve_the_entry_page(client):
    for path in ("/", "/profile", "/some/deep/link"):
        response = client.get(path)
        assert response.status_code == 200
        assert "entry page" in response.text


def test_existing_static_files_are_served(client):
    response = client.get("/app.js")

    assert response.status_code == 200
    assert "client" in response.text


def test_path_traversal_falls_back_to_entry_page(client, tmp_path):
    (tmp_path / "secret.txt").write_text("top secret")

    response = client.get("/..%2Fsecret.txt")

    assert "top secret" not in response.text


def test_unknown_api_path_is_not_found(client):
    response = client.get("/api/nothing")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found."}


def test_missing_entry_page_is_not_found(settings, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    client = TestClient(create_app(settings.model_copy(update={"static_dir": empty})))

    assert client.get("/").status_code == 404


def test_lifespan_creates_store_and_schedules_purge(app, data_file):
    with TestClient(app):
        assert data_file.exists()
        assert app.state.scheduler.get_job(PURGE_JOB_ID) is not None
    assert not app.state.scheduler.running


def test_internal_errors_are_not_leaked(app, monkeypatch):
    def broken(*args, **kwargs):
        raise InternalError("disk on fire at /var/secret")

    monkeypatch.setattr(app.state.store, "load", broken)
    response = TestClient(app).post(
        "/api/signup", json={"name": "Ada", "email": "ada@example.com", "password": "pw"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}


def test_unexpected_errors_are_not_leaked(app, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("stack details")

    monkeypatch.setattr(app.state.store, "load", broken)
    client = TestClient(app, raise_server_exceptions=False)
    response = client.post("/api/login", json={"email": "ada@example.com", "password": "pw"})

    assert response.status_code == 500
    assert "stack details" not in response.text
