from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.app.adapters.io.environment import ServerSettings
from backend.app.main import create_app


@pytest.fixture
def storage_dir(tmp_path):
    """Storage root for one test; created by the app's startup hook."""
    return tmp_path / "files"


@pytest.fixture
def client(storage_dir):
    app = create_app(ServerSettings(), storage_dir=str(storage_dir))
    # Entering the context runs startup, which creates storage_dir.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload(client):
    """POST ``content`` as multipart field ``file`` named ``filename``."""

    def _upload(filename: str, content: bytes, field: str = "file"):
        return client.post("/upload", files={field: (filename, content)})

    return _upload
