"""Environment-driven settings for the backend I/O boundary."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field


DEFAULT_STORAGE_DIR = "files"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_MAX_MULTIPART_MEMORY = 8 << 20  # 8 MiB


class ServerSettings(BaseModel):
    """Process-wide settings, read once when the app is built."""

    # Kept relative by default so stored paths read "files/<name>".
    storage_dir: str = DEFAULT_STORAGE_DIR
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    max_multipart_memory: int = Field(default=DEFAULT_MAX_MULTIPART_MEMORY, gt=0)


def _env(environ: Mapping[str, str], key: str) -> Optional[str]:
    val = environ.get(key)
    if val is None:
        return None
    val = val.strip()
    return val or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """Build :class:`ServerSettings` from ``STORAGE_DIR``, ``HOST``, ``PORT``
    and ``MAX_MULTIPART_MEMORY``.

    Unset or blank variables fall back to the defaults. Malformed values
    (e.g. a non-numeric port) raise ``pydantic.ValidationError``.
    """
    env = os.environ if environ is None else environ

    raw = {
        "storage_dir": _env(env, "STORAGE_DIR"),
        "host": _env(env, "HOST"),
        "port": _env(env, "PORT"),
        "max_multipart_memory": _env(env, "MAX_MULTIPART_MEMORY"),
    }
    return ServerSettings(**{k: v for k, v in raw.items() if v is not None})

