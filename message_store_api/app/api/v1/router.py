"""
Top‑level router for version 1 of the API.

When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import messages

router = APIRouter()

router.include_router(messages.router, prefix="/messages", tags=["messages"])
