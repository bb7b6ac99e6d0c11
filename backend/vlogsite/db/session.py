from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional, Sequence

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from vlogsite.core.config import settings

logger = logging.getLogger(__name__)

SortSpec = Sequence[tuple[str, int]]


class StorageUnavailableError(RuntimeError):
    def __init__(self, message: str = "Storage is unavailable.") -> None:
        super().__init__(message)


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    # MongoClient connects lazily; the first operation pays the setup cost.
    timeout = settings.MONGODB_TIMEOUT_MS
    return MongoClient(
        settings.MONGODB_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout,
        connectTimeoutMS=timeout,
        socketTimeoutMS=timeout,
    )


def close_client() -> None:
    if get_client.cache_info().currsize:
        get_client().close()
    get_client.cache_clear()


def get_database() -> Database:
    return get_client()[settings.MONGODB_DB]


def insert(collection: str, document: dict[str, Any]) -> str:
    try:
        result = get_database()[collection].insert_one(document)
    except PyMongoError as e:
        logger.error("insert into %s failed: %s", collection, e)
        raise StorageUnavailableError() from e
    return str(result.inserted_id)


def find_one(
    collection: str,
    filter: dict[str, Any],
    sort: Optional[SortSpec] = None,
) -> Optional[dict[str, Any]]:
    try:
        return get_database()[collection].find_one(filter, sort=list(sort) if sort else None)
    except PyMongoError as e:
        logger.error("find_one on %s failed: %s", collection, e)
        raise StorageUnavailableError() from e


def find_many(
    collection: str,
    filter: dict[str, Any],
    sort: Optional[SortSpec] = None,
) -> list[dict[str, Any]]:
    try:
        cursor = get_database()[collection].find(filter)
        if sort:
            cursor = cursor.sort(list(sort))
        return list(cursor)
    except PyMongoError as e:
        logger.error("find on %s failed: %s", collection, e)
        raise StorageUnavailableError() from e
