from __future__ import annotations

from vlogsite.schemas.contact import ContactCreate, ContactMessageOut
from vlogsite.schemas.result import FieldIssue, SubmissionResult, UploadResult
from vlogsite.schemas.token import AdminOut, Token
from vlogsite.schemas.vlog import VlogPostCreate, VlogPostOut

__all__ = [
    "Token",
    "AdminOut",
    "ContactCreate",
    "ContactMessageOut",
    "VlogPostCreate",
    "VlogPostOut",
    "FieldIssue",
    "SubmissionResult",
    "UploadResult",
]
