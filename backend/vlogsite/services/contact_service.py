from __future__ import annotations

import logging
from typing import Any, Mapping

from vlogsite.crud import contact_message as crud
from vlogsite.db.session import StorageUnavailableError
from vlogsite.schemas.contact import ContactCreate, ContactMessageOut
from vlogsite.schemas.result import SubmissionResult
from vlogsite.schemas.validation import parse_fields
from vlogsite.utils.dates import document_timestamp

logger = logging.getLogger(__name__)


def submit_contact_message(fields: Mapping[str, Any]) -> SubmissionResult:
    data, issues = parse_fields(ContactCreate, fields)
    if data is None:
        logger.info(
            "contact message rejected: %s", ", ".join(f"{i.path}: {i.message}" for i in issues)
        )
        return SubmissionResult(success=False, message="Invalid form data.", issues=issues)

    try:
        message_id = crud.create_contact_message(
            name=data.name,
            email=str(data.email),
            subject=data.subject,
            message=data.message,
        )
    except StorageUnavailableError:
        return SubmissionResult(success=False, message="Database error. Failed to send message.")

    logger.info("contact message %s saved", message_id)
    return SubmissionResult(
        success=True, message="Your message has been sent successfully!", id=message_id
    )


def _to_out(doc: Mapping[str, Any]) -> ContactMessageOut:
    return ContactMessageOut(
        id=str(doc["_id"]),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        subject=doc.get("subject", ""),
        message=doc.get("message", ""),
        created_at=document_timestamp(doc, "createdAt"),
    )


def list_contact_messages() -> list[ContactMessageOut]:
    messages: list[ContactMessageOut] = []
    for doc in crud.list_contact_messages():
        try:
            messages.append(_to_out(doc))
        except ValueError as e:
            logger.warning("skipping malformed contact message %s: %s", doc.get("_id"), e)
    return messages
