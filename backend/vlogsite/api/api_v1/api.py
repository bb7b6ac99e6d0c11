from __future__ import annotations

from fastapi import APIRouter

from vlogsite.api.api_v1.endpoints import admin, auth, contact, media, vlogs

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(contact.router)
api_router.include_router(vlogs.router)
api_router.include_router(media.router)
api_router.include_router(admin.router)
