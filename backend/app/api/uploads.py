from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from app.api.dependencies import provide_uploader
from app.api.schemas.upload import HealthResponse, UploadFailureResponse, UploadResponse
from app.application.uploader import ContentUploader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])

_UPLOAD_REQUEST_BODY = {
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {"file": {"type": "string", "format": "binary"}},
            }
        }
    }
}


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"description": "No file uploaded"}, 500: {"model": UploadFailureResponse}},
    openapi_extra={"requestBody": _UPLOAD_REQUEST_BODY},
)
async def upload_file(
    request: Request,
    uploader: ContentUploader = Depends(provide_uploader),
):
    form = await request.form()
    file = form.get("file")
    # A plain text field named "file" counts as no upload.
    payload = await file.read() if isinstance(file, UploadFile) else b""
    if not payload:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})

    logger.info("Uploading file: %s, Size: %d bytes", file.filename, len(payload))

    try:
        result = await uploader.upload_file(payload)
    except Exception as exc:
        logger.exception("Upload of %s failed", file.filename)
        return JSONResponse(
            status_code=500,
            content=UploadFailureResponse(error=str(exc)).model_dump(),
        )

    return UploadResponse(url=result.url, filename=file.filename, size=len(payload))


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="OK",
        service="GitHub File Upload",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
