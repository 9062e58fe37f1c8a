"""Ideas API Router - JSON endpoints over the session repository."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ...domain import Idea, InMemorySessionRepository, SessionNotFoundError
from ..contracts import IdeaResponse, NewIdeaRequest, SessionResponse
from ..deps import get_session_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ideas", tags=["ideas"])

SESSION_NOT_FOUND = "Session not found"


@router.get("/forsession/{session_id}", response_model=list[IdeaResponse])
async def for_session(
    session_id: int,
    repository: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
) -> list[IdeaResponse]:
    """List a session's ideas in the order they were added."""
    session = await repository.get_by_id(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND)

    return [IdeaResponse.from_domain(idea) for idea in session.ideas]


@router.post("/create", response_model=SessionResponse)
async def create(
    request: NewIdeaRequest,
    repository: Annotated[InMemorySessionRepository, Depends(get_session_repository)],
) -> SessionResponse:
    """
    Add an idea to a session and return the updated session.

    Field validation (blank name/description, out-of-range session id) is
    rejected with 400 before this runs.
    """
    idea = Idea(name=request.name, description=request.description)
    try:
        updated = await repository.add_idea(request.session_id, idea)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=SESSION_NOT_FOUND) from exc
    logger.info("Added idea %r to session %d", request.name, updated.id)

    return SessionResponse.from_domain(updated)
