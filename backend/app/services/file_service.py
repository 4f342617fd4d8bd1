"""Storage operations behind the upload/download routes.

Routers handle HTTP concerns (form parsing, responses); this module only knows
about the storage directory and raises backend exceptions on failure.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from starlette.datastructures import UploadFile

from backend.utils.upload_storage import base_name, stream_to_path

from ..exceptions import UploadWriteError
from ..models.v1.files_models import StoredUpload

logger = logging.getLogger(__name__)


def storage_path(storage_dir: str, name: str) -> str:
    return os.path.join(storage_dir, name)


async def save_upload(storage_dir: str, file: UploadFile) -> StoredUpload:
    """Write ``file`` to ``<storage_dir>/<base name of its filename>``.

    The storage directory is created if it has gone missing. An existing file
    under the same name is overwritten. Any filesystem error
    (permissions, no space left, the name resolving to a directory) is raised
    as :class:`UploadWriteError` carrying the OS error text.
    """
    orig = file.filename or ""
    saved_name = base_name(orig)
    dest = storage_path(storage_dir, saved_name)

    try:
        os.makedirs(storage_dir, exist_ok=True)
        size_bytes = await stream_to_path(file, dest)
    except OSError as e:
        logger.warning("Could not store upload %r at %s: %s", orig, dest, e)
        raise UploadWriteError(str(e)) from e

    logger.info("Stored upload %r as %s (%d bytes)", orig, dest, size_bytes)
    return StoredUpload(
        original_name=orig,
        saved_name=saved_name,
        path=dest,
        size_bytes=size_bytes,
    )


def resolve_download(storage_dir: str, filename: str) -> Optional[str]:
    """Return the path of a stored file, or None if no regular file exists there."""
    path = storage_path(storage_dir, filename)
    if not os.path.isfile(path):
        return None
    return path
