"""
Pytest configuration and fixtures
"""
import pytest

from sessiond import create_app


@pytest.fixture
def web_root(tmp_path):
    """Minimal web bundle"""
    root = tmp_path / "build"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<html>bundle</html>")
    (root / "assets" / "index.html").write_text("<html>assets</html>")
    (root / "assets" / "app.js").write_text("console.log('hi');")
    return root


@pytest.fixture
def app(tmp_path, web_root):
    """Application with its own store and log file"""
    app = create_app({
        "TESTING": True,
        "LOG_PATH": str(tmp_path / "logs" / "app.log"),
        "WEB_ROOT": str(web_root),
    })
    return app


@pytest.fixture
def client(app):
    """Flask test client"""
    return app.test_client()


@pytest.fixture
def store(app):
    """Session store of the app under test"""
    return app.extensions["session_store"]


@pytest.fixture
def new_session_id(client):
    """Creates a session over HTTP and returns its encoded id"""
    def _create():
        r = client.post("/api/new_session")
        assert r.status_code == 200
        return r.get_json()["id_base64"]
    return _create
