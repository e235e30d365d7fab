"""Main web router."""

from fastapi import APIRouter

from src.web.sessions import router as sessions_router
from src.web.users import router as users_router

web_router = APIRouter()

web_router.include_router(users_router, tags=["users"])
web_router.include_router(sessions_router, tags=["sessions"])
