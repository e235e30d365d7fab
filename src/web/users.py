"""User pages."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.auth import get_optional_user
from src.models.user import User
from src.web.context import get_base_context, templates

router = APIRouter()


@router.get("/", name="root", response_class=HTMLResponse)
@router.get("/users/new", name="users_new", response_class=HTMLResponse)
async def new_user_page(
    request: Request,
    user: Annotated[User | None, Depends(get_optional_user)],
) -> HTMLResponse:
    """Render the sign-in page, or a greeting when already signed in."""
    context = get_base_context(request, user)
    return templates.TemplateResponse(request, "users/new.html", context)
