import pytest
from pydantic import ValidationError
from starlette.formparsers import MultiPartParser

from backend.app.adapters.io.environment import ServerSettings, load_settings
from backend.app.main import create_app


def test_defaults_without_environment():
    s = load_settings({})

    assert s.storage_dir == "files"
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.max_multipart_memory == 8 * 1024 * 1024


def test_environment_overrides():
    s = load_settings({
        "STORAGE_DIR": "/srv/uploads",
        "HOST": "127.0.0.1",
        "PORT": "9000",
        "MAX_MULTIPART_MEMORY": "1024",
    })

    assert s.storage_dir == "/srv/uploads"
    assert s.host == "127.0.0.1"
    assert s.port == 9000
    assert s.max_multipart_memory == 1024


def test_blank_values_fall_back_to_defaults():
    s = load_settings({"STORAGE_DIR": "  ", "PORT": ""})

    assert s.storage_dir == "files"
    assert s.port == 8080


@pytest.mark.parametrize("port", ["http", "70000", "-1"])
def test_invalid_port_is_rejected(port):
    with pytest.raises(ValidationError):
        load_settings({"PORT": port})


def test_create_app_applies_settings(tmp_path):
    default_spool = MultiPartParser.spool_max_size
    settings = ServerSettings(storage_dir=str(tmp_path / "store"), max_multipart_memory=4096)
    app = create_app(settings)

    assert app.state.storage_dir == str(tmp_path / "store")
    assert app.state.max_multipart_memory == 4096
    assert MultiPartParser.spool_max_size == default_spool


def test_apps_keep_their_own_multipart_memory_limit(tmp_path):
    default_spool = MultiPartParser.spool_max_size
    app_a = create_app(ServerSettings(max_multipart_memory=111), storage_dir=str(tmp_path / "a"))
    app_b = create_app(ServerSettings(max_multipart_memory=222), storage_dir=str(tmp_path / "b"))

    assert app_a.state.max_multipart_memory == 111
    assert app_b.state.max_multipart_memory == 222
    assert MultiPartParser.spool_max_size == default_spool


def test_storage_dir_argument_wins_over_settings(tmp_path):
    app = create_app(ServerSettings(storage_dir="elsewhere"), storage_dir=str(tmp_path))

    assert app.state.storage_dir == str(tmp_path)


def test_startup_creates_storage_dir(client, storage_dir):
    assert storage_dir.is_dir()
