"""Ideas API contracts.

JSON on the wire is camelCase (``dateCreated``, ``sessionId``); Python code
keeps snake_case. Request models also accept the snake_case field names.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain import BrainstormSession, Idea

MAX_SESSION_ID = 1_000_000

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewIdeaRequest(BaseModel):
    """Request to add an idea to an existing session."""

    name: str = Field(
        min_length=1,
        description="Idea title",
        examples=["Offline mode"],
    )
    description: str = Field(
        min_length=1,
        description="What the idea is about",
        examples=["Let people keep brainstorming on a plane"],
    )
    session_id: int = Field(
        strict=True,
        ge=1,
        le=MAX_SESSION_ID,
        description="Session the idea belongs to",
        examples=[1],
    )

    model_config = ConfigDict(**_CAMEL, str_strip_whitespace=True)


class IdeaResponse(BaseModel):
    """A single idea as returned by the API."""

    id: int
    name: str
    description: str
    date_created: datetime

    model_config = _CAMEL

    @classmethod
    def from_domain(cls, idea: Idea) -> IdeaResponse:
        return cls(
            id=idea.id,
            name=idea.name,
            description=idea.description,
            date_created=idea.date_created,
        )


class SessionResponse(BaseModel):
    """A session with all of its ideas."""

    id: int
    name: str
    date_created: datetime
    ideas: list[IdeaResponse] = Field(default_factory=list)

    model_config = _CAMEL

    @classmethod
    def from_domain(cls, session: BrainstormSession) -> SessionResponse:
        return cls(
            id=session.id,
            name=session.name,
            date_created=session.date_created,
            ideas=[IdeaResponse.from_domain(idea) for idea in session.ideas],
        )
