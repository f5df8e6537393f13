# =============================================================================
# app/routers/upload.py - Image Upload Endpoints
# =============================================================================
# Handles image uploads for content items (news photos, teacher portraits,
# course covers, achievement photos). Each resource uploads into its own
# storage bucket and gets back a public URL to store on the row.
# =============================================================================

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Request
from starlette.datastructures import UploadFile

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from app.exceptions import MissingFileError
from core.models.auth import AuthSession
from core.services.content_service import RESOURCES
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

router = APIRouter()

UploadResource = Literal["news", "achievements", "teachers", "courses"]


@router.post("/{resource}/upload")
async def upload_image(
    resource: Annotated[UploadResource, Path(description="Content type the image belongs to")],
    request: Request,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """
    Upload an image to the resource's storage bucket.

    This endpoint:
    1. Validates the file (present, image MIME type, size)
    2. Stores it under a generated {timestamp}-{random}.{ext} name
    3. Removes the image it replaces, if one was given

    Multipart fields:
        file: Image file (JPG, PNG, WebP or GIF)
        replaces: Public URL of the image being replaced (optional)

    Returns {fileName, publicUrl}.
    """
    form = await request.form()

    file = form.get("file")
    if not isinstance(file, UploadFile) or not file.filename:
        raise MissingFileError()

    replaces = form.get("replaces")
    if not isinstance(replaces, str) or not replaces:
        replaces = None

    content = await file.read()
    StorageService.validate_image(file.content_type, len(content))

    logger.info(f"Uploading {resource} image: {file.filename} ({len(content)} bytes)")

    return StorageService.upload_image(
        db,
        RESOURCES[resource],
        filename=file.filename,
        content=content,
        content_type=file.content_type,
        replaces=replaces,
    )
