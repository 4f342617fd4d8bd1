from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, PlainTextResponse
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
import logging

from backend.utils.upload_storage import is_multipart, make_multipart_parser

from ..exceptions import UploadFormError
from ..services.file_service import resolve_download, save_upload

logger = logging.getLogger(__name__)

FORM_FIELD = "file"

router = APIRouter()


def get_storage_dir(request: Request) -> str:
    """Storage root for the running app (set by ``create_app``)."""
    return request.app.state.storage_dir


async def _read_form(request: Request) -> FormData:
    if not is_multipart(request.headers.get("content-type")):
        # urlencoded (or anything else) has no file parts; let Starlette handle it.
        return await request.form()

    parser = make_multipart_parser(
        request.headers,
        request.stream(),
        spool_max_size=request.app.state.max_multipart_memory,
    )
    return await parser.parse()


async def _read_upload_form(request: Request) -> FormData:
    try:
        return await _read_form(request)
    except MultiPartException as e:
        raise UploadFormError(e.message) from e
    except StarletteHTTPException as e:
        # Starlette reports malformed form bodies as a 400 HTTPException.
        raise UploadFormError(str(e.detail)) from e


def _upload_field(form: FormData) -> UploadFile:
    # First file part wins when the field is repeated.
    for value in form.getlist(FORM_FIELD):
        if isinstance(value, UploadFile):
            return value
    raise UploadFormError(f"no file part named {FORM_FIELD!r}")


@router.post("/upload", response_class=PlainTextResponse)
async def upload_file(request: Request, storage_dir: str = Depends(get_storage_dir)):
    """Store the ``file`` part of a multipart form under its base name.

    Failures are raised as ``UploadFormError`` / ``UploadWriteError`` and turned
    into 400 plain-text responses by the handlers in ``main.py``.
    """
    form = await _read_upload_form(request)
    try:
        stored = await save_upload(storage_dir, _upload_field(form))
    finally:
        await form.close()

    return PlainTextResponse(stored.confirmation())


@router.get("/download/{filename}")
def download_file(filename: str, storage_dir: str = Depends(get_storage_dir)):
    path = resolve_download(storage_dir, filename)
    if path is None:
        logger.warning("Download of unknown file %r", filename)
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(path)
