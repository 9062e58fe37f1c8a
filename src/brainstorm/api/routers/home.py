"""Home Router - HTML index listing sessions, plus the "new session" form."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from ...domain import BrainstormSession, InMemorySessionRepository
from ..contracts import NewSessionForm
from ..deps import get_session_repository, get_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["home"])


async def _render_index(
    request: Request,
    repository: InMemorySessionRepository,
    templates: Jinja2Templates,
    errors: list[str] | None = None,
) -> HTMLResponse:
    sessions = await repository.list_all()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"sessions": sessions, "errors": errors or []},
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    repository: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
    templates: Annotated[Jinja2Templates, Depends(get_templates)],
) -> HTMLResponse:
    """List every session."""
    return await _render_index(request, repository, templates)


@router.post("/", response_class=HTMLResponse)
async def create_session(
    request: Request,
    repository: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
    templates: Annotated[Jinja2Templates, Depends(get_templates)],
    session_name: Annotated[str, Form(alias="SessionName")] = "",
) -> Response:
    """
    Create a session from the index page form.

    Valid input redirects back to the index (post/redirect/get). Invalid
    input re-renders the index with the validation messages.
    """
    try:
        form = NewSessionForm.model_validate({"SessionName": session_name})
    except ValidationError as exc:
        messages = [f"SessionName: {error['msg']}" for error in exc.errors()]
        return await _render_index(request, repository, templates, errors=messages)

    stored = await repository.add(BrainstormSession(name=form.session_name))
    logger.info("Created session %d from index form", stored.id)
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
