"""Process entry point: serve the API with uvicorn.

    filedrop-server                # console script
    python -m backend.app.server   # equivalent

Host, port and storage directory come from HOST, PORT and STORAGE_DIR.
"""

from __future__ import annotations

import uvicorn

from .adapters.io.environment import load_settings

APP_FACTORY = "backend.app.main:create_app"


def main() -> None:
    settings = load_settings()
    # uvicorn builds the single app from the factory; it exits with status 1
    # if the socket cannot be bound.
    uvicorn.run(APP_FACTORY, factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
