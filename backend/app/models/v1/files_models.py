"""API models for the file upload/download endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class StoredUpload(BaseModel):
    """Outcome of persisting one uploaded file."""

    original_name: str  # filename as declared by the client
    saved_name: str  # base name used on disk
    path: str  # storage_dir joined with saved_name
    size_bytes: int

    def confirmation(self) -> str:
        return (
            f"File {self.original_name} uploaded successfully "
            f"with fields as {self.path}"
        )
