"""Helpers for storing uploads on the local filesystem.

Uploaded files are streamed straight into their destination, truncating any
previous content under the same name. There is no temp file and no rename:
concurrent writers to the same name race, and the last one to finish wins.
"""

from __future__ import annotations

import posixpath
from typing import AsyncGenerator, Optional

from starlette.datastructures import Headers, UploadFile
from starlette.formparsers import MultiPartParser


DEFAULT_CHUNK_SIZE = 1_048_576  # 1 MiB


def base_name(filename: str) -> str:
    """Return the last path segment of a client-supplied filename.

    Both ``/`` and ``\\`` are treated as separators, so ``a/b/report.txt`` and
    ``C:\\tmp\\report.txt`` both become ``report.txt``. A trailing separator
    yields an empty string.
    """
    return posixpath.basename(filename.replace("\\", "/"))


async def stream_to_path(
    file: UploadFile,
    dest_path: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Copy an UploadFile into ``dest_path``, creating or truncating it.

    Returns the number of bytes written. ``OSError`` from opening or writing
    the destination propagates to the caller.

    This function does *not* close the UploadFile; callers should close it.
    """
    written = 0
    with open(dest_path, "wb") as out:
        while True:
            chunk = await file.read(chunk_size)
            if not chunk:
                break
            out.write(chunk)
            written += len(chunk)
    return written


def is_multipart(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == "multipart/form-data"


def make_multipart_parser(
    headers: Headers,
    stream: AsyncGenerator[bytes, None],
    *,
    spool_max_size: int,
) -> MultiPartParser:
    """Build a Starlette multipart parser with its own spool threshold.

    Each file part is held in memory up to ``spool_max_size`` bytes, then
    rolled over to a temporary file on disk. The threshold is set on this
    parser instance only; ``MultiPartParser.spool_max_size`` is left as is.
    """
    parser = MultiPartParser(headers, stream)
    parser.spool_max_size = int(spool_max_size)
    return parser
