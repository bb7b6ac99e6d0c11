from __future__ import annotations

from typing import Any, Optional

from bson import ObjectId

from vlogsite.db import session

COLLECTION = "vlogPosts"

NEWEST_FIRST = [("createdAt", -1), ("_id", -1)]


def create_vlog_post(doc: dict[str, Any]) -> str:
    return session.insert(COLLECTION, dict(doc))


def list_vlog_posts() -> list[dict[str, Any]]:
    return session.find_many(COLLECTION, {}, sort=NEWEST_FIRST)


def get_vlog_post_by_slug(slug: str) -> Optional[dict[str, Any]]:
    # Slugs are not unique; the most recent post wins.
    return session.find_one(COLLECTION, {"slug": slug}, sort=NEWEST_FIRST)


def get_vlog_post_by_id(post_id: str) -> Optional[dict[str, Any]]:
    if not ObjectId.is_valid(post_id):
        return None
    return session.find_one(COLLECTION, {"_id": ObjectId(post_id)})
