"""
File reading for uploads.

Converts a multipart upload into an ImageAsset. Both the file picker and
drag-and-drop in the client end up here through the same endpoint.
"""

import mimetypes

from fastapi import UploadFile

from ..domain.models import ImageAsset
from ..services.exceptions import PayloadTooLarge
from ..workflow.controller import MAX_UPLOAD_BYTES

FALLBACK_MIME_TYPE = "application/octet-stream"


async def read_upload(upload: UploadFile, max_bytes: int = MAX_UPLOAD_BYTES) -> ImageAsset:
    """
    Reads at most max_bytes + 1 bytes, so an oversized file is never
    buffered in full.

    Raises:
        PayloadTooLarge: If the file is larger than max_bytes.
        ValueError: If the file is empty or not an image.
    """
    if upload.size is not None and upload.size > max_bytes:
        raise PayloadTooLarge(upload.size, max_bytes)

    mime_type = upload.content_type
    if not mime_type or mime_type == FALLBACK_MIME_TYPE:
        mime_type = mimetypes.guess_type(upload.filename or "")[0] or FALLBACK_MIME_TYPE
    if not mime_type.startswith("image/"):
        raise ValueError(f"Only image files are accepted (got {mime_type})")

    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise PayloadTooLarge(upload.size or len(data), max_bytes)
    return ImageAsset(data=data, mime_type=mime_type)
