from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from vlogsite.api import deps
from vlogsite.schemas.result import SubmissionResult
from vlogsite.schemas.token import AdminOut
from vlogsite.schemas.vlog import VlogPostOut
from vlogsite.services import vlog_service

router = APIRouter(prefix="/vlogs", tags=["vlogs"])


@router.get("/", response_model=list[VlogPostOut])
def list_vlogs() -> list[VlogPostOut]:
    return vlog_service.list_vlog_posts()


@router.get("/id/{post_id}", response_model=VlogPostOut)
def read_vlog_by_id(post_id: str) -> VlogPostOut:
    post = vlog_service.get_vlog_post_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Vlog post not found")
    return post


@router.get("/{slug}", response_model=VlogPostOut)
def read_vlog(slug: str) -> VlogPostOut:
    post = vlog_service.get_vlog_post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Vlog post not found")
    return post


@router.post("/", response_model=SubmissionResult)
def create_vlog(
    response: Response,
    fields: dict[str, Any] = Body(...),
    current_admin: AdminOut = Depends(deps.get_current_admin),
) -> SubmissionResult:
    result = vlog_service.create_vlog_post(fields)
    response.status_code = deps.submission_status(result)
    return result
