import logging

from backend.app.main import _SkipPingAccessLogs


def test_ping_returns_pong(client):
    resp = client.get("/ping")

    assert resp.status_code == 200
    assert resp.json() == {"message": "pong"}


def test_ping_ignores_headers(client):
    resp = client.get("/ping", headers={"X-Probe": "1", "Accept": "text/html"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "pong"}


def _access_record(path: str) -> logging.LogRecord:
    # Same shape uvicorn uses for its access log lines.
    return logging.LogRecord(
        "uvicorn.access", logging.INFO, __file__, 0,
        '%s - "%s %s HTTP/%s" %d',
        ("127.0.0.1:5000", "GET", path, "1.1", 200),
        None,
    )


def test_access_log_filter_hides_ping_only():
    f = _SkipPingAccessLogs()

    assert f.filter(_access_record("/ping")) is False
    assert f.filter(_access_record("/download/ping")) is True
    assert f.filter(_access_record("/upload")) is True
