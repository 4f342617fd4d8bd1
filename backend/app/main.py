from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from typing import Optional
import time

import logging

from .adapters.io.environment import ServerSettings, load_settings
from .exceptions import UploadFormError, UploadWriteError
from .startup import register_startup

logger = logging.getLogger(__name__)


class _SkipPingAccessLogs(logging.Filter):
    """Hide uvicorn access logs for /ping to keep liveness probes out of the console."""
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        return '"GET /ping ' not in msg

# Attach the filter once
_access_logger = logging.getLogger("uvicorn.access")
# Avoid duplicate filters on reload
if not any(isinstance(f, _SkipPingAccessLogs) for f in getattr(_access_logger, "filters", [])):
    _access_logger.addFilter(_SkipPingAccessLogs())

# Routers
from .routers.files import router as files_router
from .routers.health import router as health_router


def create_app(
    settings: Optional[ServerSettings] = None,
    *,
    storage_dir: Optional[str] = None,
) -> FastAPI:
    """Build the file-drop API.

    ``settings`` defaults to the process environment; ``storage_dir`` overrides
    just the storage root (tests point it at a temporary directory).

    Nothing is built at import time; serve it as an app factory:

        uvicorn --factory backend.app.main:create_app
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="File Drop API",
        version="1.0.0",
        description="Upload files by multipart form, download them by name",
    )
    app.state.settings = settings
    app.state.storage_dir = storage_dir if storage_dir is not None else settings.storage_dir

    app.state.max_multipart_memory = settings.max_multipart_memory
    register_startup(app)

    # Robust request logging (won't crash on exceptions)
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        t0 = time.time()
        try:
            return await call_next(request)
        except Exception as e:
            dt = (time.time() - t0) * 1000
            logger.error("%s %s -> ERR in %.1fms: %s: %s",
                         request.method, request.url.path, dt, type(e).__name__, e)
            raise

    # Upload failures are reported as 400 with the raw error text.
    @app.exception_handler(UploadFormError)
    async def _upload_form_error(request: Request, exc: UploadFormError):
        logger.warning("Rejected upload: get form err: %s", exc)
        return PlainTextResponse(f"get form err: {exc}", status_code=400)

    @app.exception_handler(UploadWriteError)
    async def _upload_write_error(request: Request, exc: UploadWriteError):
        return PlainTextResponse(f"upload file err: {exc}", status_code=400)

    app.include_router(files_router, tags=["files"])
    app.include_router(health_router)

    return app
