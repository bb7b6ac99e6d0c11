from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class FieldIssue(BaseModel):
    path: str
    message: str


class SubmissionResult(BaseModel):
    success: bool
    message: str
    id: Optional[str] = None
    issues: list[FieldIssue] = Field(default_factory=list)


class UploadResult(BaseModel):
    success: bool
    image_url: Optional[str] = None
    error: Optional[str] = None
