from __future__ import annotations

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from vlogsite.api import deps
from vlogsite.core.config import settings
from vlogsite.schemas.result import UploadResult
from vlogsite.schemas.token import AdminOut
from vlogsite.services import media_service

router = APIRouter(prefix="/media", tags=["media"])


@router.post("/images", response_model=UploadResult)
def upload_image(
    response: Response,
    file: UploadFile = File(...),
    current_admin: AdminOut = Depends(deps.get_current_admin),
) -> UploadResult:
    # One byte past the limit is enough to reject an oversized upload.
    data = file.file.read(settings.MAX_UPLOAD_BYTES + 1)
    result = media_service.upload_image(data, filename=file.filename, content_type=file.content_type)

    if result.success:
        response.status_code = status.HTTP_201_CREATED
    elif not media_service.is_configured():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result
