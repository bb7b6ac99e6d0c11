from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from vlogsite.crud import vlog_post as crud
from vlogsite.db.session import StorageUnavailableError
from vlogsite.schemas.result import SubmissionResult
from vlogsite.schemas.validation import parse_fields
from vlogsite.schemas.vlog import VlogPostCreate, VlogPostOut
from vlogsite.services.page_cache import LISTING_KEY, page_cache, post_key
from vlogsite.utils.dates import document_timestamp
from vlogsite.utils.slugs import slugify

logger = logging.getLogger(__name__)


def _to_out(doc: Mapping[str, Any]) -> VlogPostOut:
    created_at = document_timestamp(doc, "createdAt")
    updated_at = document_timestamp(doc, "updatedAt") if doc.get("updatedAt") is not None else created_at
    return VlogPostOut(
        id=str(doc["_id"]),
        title=doc.get("title", ""),
        author=doc.get("author", ""),
        content=doc.get("content", ""),
        featured_image_url=doc.get("featuredImageUrl") or None,
        slug=doc.get("slug", ""),
        created_at=created_at,
        updated_at=updated_at,
    )


def _try_to_out(doc: Mapping[str, Any]) -> Optional[VlogPostOut]:
    try:
        return _to_out(doc)
    except ValueError as e:
        logger.warning("skipping malformed vlog post %s: %s", doc.get("_id"), e)
        return None


def _to_outs(docs: Iterable[Mapping[str, Any]]) -> list[VlogPostOut]:
    return [post for post in (_try_to_out(d) for d in docs) if post is not None]


def create_vlog_post(fields: Mapping[str, Any]) -> SubmissionResult:
    post, issues = parse_fields(VlogPostCreate, fields)
    if post is None:
        logger.info("vlog post rejected: %d issue(s)", len(issues))
        return SubmissionResult(success=False, message="Validation failed.", issues=issues)

    now = datetime.now(timezone.utc)
    slug = slugify(post.title)
    doc: dict[str, Any] = {
        "title": post.title,
        "author": post.author,
        "content": post.content,
        "slug": slug,
        "createdAt": now,
        "updatedAt": now,
    }
    if post.featured_image_url is not None:
        doc["featuredImageUrl"] = post.featured_image_url

    try:
        post_id = crud.create_vlog_post(doc)
    except StorageUnavailableError:
        return SubmissionResult(
            success=False, message="Database error. Failed to create vlog post."
        )

    if slug:
        page_cache.invalidate(LISTING_KEY, post_key(slug))
    else:
        # Reachable only through its id.
        page_cache.invalidate(LISTING_KEY)
    logger.info("vlog post %s created with slug %r", post_id, slug)
    return SubmissionResult(success=True, message="Vlog post created successfully!", id=post_id)


def list_vlog_posts() -> list[VlogPostOut]:
    cached = page_cache.get(LISTING_KEY)
    if cached is not None:
        return list(cached)

    generation = page_cache.generation(LISTING_KEY)
    try:
        docs = crud.list_vlog_posts()
    except StorageUnavailableError:
        logger.warning("vlog listing unavailable, serving an empty list")
        return []

    posts = _to_outs(docs)
    page_cache.set_if_generation(LISTING_KEY, generation, tuple(posts))
    return posts


def get_vlog_post_by_slug(slug: str) -> Optional[VlogPostOut]:
    if not slug:
        return None

    key = post_key(slug)
    cached = page_cache.get(key)
    if cached is not None:
        return cached

    generation = page_cache.generation(key)
    try:
        doc = crud.get_vlog_post_by_slug(slug)
    except StorageUnavailableError:
        return None
    if doc is None:
        return None

    post = _try_to_out(doc)
    if post is not None:
        page_cache.set_if_generation(key, generation, post)
    return post


def get_vlog_post_by_id(post_id: str) -> Optional[VlogPostOut]:
    try:
        doc = crud.get_vlog_post_by_id(post_id)
    except StorageUnavailableError:
        return None
    if doc is None:
        return None
    return _try_to_out(doc)
