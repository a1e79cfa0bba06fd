"""API v1 router assembly."""

from fastapi import APIRouter

from newsdesk.api.v1.endpoints import extensions, news

api_router = APIRouter()

# News listing
api_router.include_router(news.router, prefix="/news", tags=["news"])

# Extension checks
api_router.include_router(extensions.router, prefix="/extensions", tags=["extensions"])
