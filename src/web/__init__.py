"""Web routes."""

from src.web.router import web_router

__all__ = ["web_router"]
