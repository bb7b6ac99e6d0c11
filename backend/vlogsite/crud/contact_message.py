from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from vlogsite.db import session

COLLECTION = "contactMessages"


def create_contact_message(
    *,
    name: str,
    email: str,
    subject: str,
    message: str,
) -> str:
    doc = {
        "name": name,
        "email": email,
        "subject": subject,
        "message": message,
        "createdAt": datetime.now(timezone.utc),
    }
    return session.insert(COLLECTION, doc)


def list_contact_messages() -> list[dict[str, Any]]:
    return session.find_many(COLLECTION, {}, sort=[("createdAt", -1), ("_id", -1)])
