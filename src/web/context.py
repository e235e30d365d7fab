"""Template context helpers."""

from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

from src.config import get_settings
from src.constants import TEMPLATES_DIR
from src.models.user import User

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_base_context(request: Request, user: User | None = None) -> dict[str, Any]:
    """Get base context for all templates."""
    return {
        "app_name": get_settings().app_name,
        "user": user,
        "current_path": request.url.path,
    }
