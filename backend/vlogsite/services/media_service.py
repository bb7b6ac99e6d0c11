from __future__ import annotations

import hashlib
import io
import logging
import mimetypes
import time
from typing import Any, Optional

import httpx
from PIL import Image, UnidentifiedImageError

from vlogsite.core.config import settings
from vlogsite.schemas.result import UploadResult

logger = logging.getLogger(__name__)

# Parameters Cloudinary leaves out of the request signature.
_UNSIGNED_PARAMS = {"file", "api_key", "resource_type", "cloud_name"}


def is_configured() -> bool:
    return bool(
        settings.CLOUDINARY_CLOUD_NAME
        and settings.CLOUDINARY_API_KEY
        and settings.CLOUDINARY_API_SECRET
    )


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    to_sign = "&".join(
        f"{k}={params[k]}"
        for k in sorted(params)
        if k not in _UNSIGNED_PARAMS and params[k] not in (None, "")
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


def _check_image(data: bytes) -> Optional[str]:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return "File is not a valid image."
    return None


def _upload_url() -> str:
    base = str(settings.CLOUDINARY_API_URL or "").strip().rstrip("/")
    return f"{base}/{settings.CLOUDINARY_CLOUD_NAME}/image/upload"


def _error_from_response(res: httpx.Response) -> str:
    try:
        data = res.json()
    except ValueError:
        data = None

    message = None
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict):
            message = err.get("message")
        elif isinstance(data.get("message"), str):
            message = data.get("message")
    return f"Cloudinary upload failed: {message or 'Unknown Cloudinary upload error'}"


def upload_image(
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> UploadResult:
    """Upload image bytes to Cloudinary and return the hosted URL.

    Every failure, including a missing configuration, comes back as an
    ``UploadResult`` with ``success=False`` and a readable ``error``.
    """
    if not data:
        return UploadResult(success=False, error="No file provided for upload.")

    if not is_configured():
        logger.error("Cloudinary environment variables are not set.")
        return UploadResult(success=False, error="Cloudinary configuration is missing.")

    if len(data) > settings.MAX_UPLOAD_BYTES:
        limit_mb = settings.MAX_UPLOAD_BYTES / (1024 * 1024)
        return UploadResult(success=False, error=f"Image exceeds the {limit_mb:g} MB upload limit.")

    invalid = _check_image(data)
    if invalid:
        return UploadResult(success=False, error=invalid)

    name = filename or "upload"
    mime = content_type or mimetypes.guess_type(name)[0] or "application/octet-stream"

    params: dict[str, Any] = {"timestamp": int(time.time())}
    if settings.CLOUDINARY_FOLDER:
        params["folder"] = settings.CLOUDINARY_FOLDER
    params["signature"] = sign_params(params, settings.CLOUDINARY_API_SECRET)
    params["api_key"] = settings.CLOUDINARY_API_KEY

    try:
        res = httpx.post(
            _upload_url(),
            data={k: str(v) for k, v in params.items()},
            files={"file": (name, data, mime)},
            timeout=settings.UPLOAD_TIMEOUT_SECONDS,
        )
    except httpx.HTTPError as e:
        logger.error("Error uploading to Cloudinary: %s", e)
        return UploadResult(success=False, error=str(e) or "An unknown error occurred during image upload.")

    if res.status_code >= 400:
        error = _error_from_response(res)
        logger.warning("Cloudinary upload rejected (%s): %s", res.status_code, error)
        return UploadResult(success=False, error=error)

    try:
        payload = res.json()
    except ValueError:
        payload = None

    secure_url = payload.get("secure_url") if isinstance(payload, dict) else None
    if not isinstance(secure_url, str) or not secure_url:
        return UploadResult(success=False, error=_error_from_response(res))

    logger.info("image uploaded to %s", secure_url)
    return UploadResult(success=True, image_url=secure_url)
