import pytest
from fastapi.testclient import TestClient

from profilehub.core.config import Settings
from profilehub.db.store import RecordStore
from profilehub.main import create_app

SECRET = "test-secret"


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "db.json"


@pytest.fixture()
def static_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html><body>entry page</body></html>", encoding="utf-8")
    (public / "app.js").write_text("console.log('client');", encoding="utf-8")
    return public


@pytest.fixture()
def settings(data_file, static_dir):
    return Settings(secret_key=SECRET, data_file=data_file, static_dir=static_dir)


@pytest.fixture()
def store(data_file):
    return RecordStore(data_file)


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def signup(client):
    def _signup(name="Ada Lovelace", email="ada@example.com", password="analytical"):
        return client.post("/api/signup", json={"name": name, "email": email, "password": password})

    return _signup
