from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response

from vlogsite.api.deps import submission_status
from vlogsite.schemas.result import SubmissionResult
from vlogsite.services.contact_service import submit_contact_message

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("/", response_model=SubmissionResult)
def submit_contact(response: Response, fields: dict[str, Any] = Body(...)) -> SubmissionResult:
    result = submit_contact_message(fields)
    response.status_code = submission_status(result)
    return result
