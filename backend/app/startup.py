"""FastAPI startup registration.

Keep import-time side effects out of routers/modules. Any filesystem setup,
warmups, or other initialization should be registered here.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI

logger = logging.getLogger(__name__)


def register_startup(app: FastAPI) -> None:
    """Register startup hooks on the provided FastAPI app."""

    @app.on_event("startup")
    async def _ensure_runtime_directories() -> None:
        storage_dir = app.state.storage_dir
        os.makedirs(storage_dir, exist_ok=True)
        logger.info("Serving files from %s", os.path.abspath(storage_dir))
