"""
API router: aggregates the endpoint modules under /api.
"""

from fastapi import APIRouter

from ecostay.api import chat

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(chat.router)
