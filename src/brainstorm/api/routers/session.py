"""Session Router - HTML details page for one session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from ...domain import InMemorySessionRepository
from ..deps import get_session_repository, get_templates

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_class=RedirectResponse)
@router.get("/", response_class=RedirectResponse, include_in_schema=False)
async def session_without_id() -> RedirectResponse:
    """No session selected - back to the index."""
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


@router.get("/{session_id}", response_class=HTMLResponse)
async def session_detail(
    session_id: int,
    request: Request,
    repository: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
    templates: Annotated[Jinja2Templates, Depends(get_templates)],
) -> Response:
    """Show a session and its ideas."""
    session = await repository.get_by_id(session_id)
    if session is None:
        return PlainTextResponse("Session not found.", status_code=status.HTTP_404_NOT_FOUND)

    return templates.TemplateResponse(request, "session.html", {"session": session})
