"""Brainstorm Domain Models.

A brainstorm session is an ordered collection of ideas. Both are immutable
Pydantic models; adding an idea produces a new session rather than mutating
the stored one, so the repository decides when a change becomes visible.

Identity:
    Ids are plain integers assigned by the repository. An unsaved model
    carries ``id=0`` until the repository hands out a real one.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(UTC)


class Idea(BaseModel):
    """A single idea captured during a session.

    Attributes:
        id: Repository-assigned identifier (0 until stored)
        name: Short title shown in listings
        description: Free-form text
        date_created: When the idea was captured
        session_id: Owning session, bound when the idea is added to one
    """

    id: int = Field(default=0, ge=0)
    name: str
    description: str
    date_created: datetime = Field(default_factory=utc_now)
    session_id: int | None = None

    model_config = ConfigDict(frozen=True)


class BrainstormSession(BaseModel):
    """A named brainstorming session and its ideas, in the order they were added."""

    id: int = Field(default=0, ge=0)
    name: str
    date_created: datetime = Field(default_factory=utc_now)
    ideas: tuple[Idea, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def idea_count(self) -> int:
        return len(self.ideas)

    def add_idea(self, idea: Idea) -> BrainstormSession:
        """Append an idea immutably.

        The idea is re-bound to this session. The original session is left
        unchanged.

        Example:
            >>> session = BrainstormSession(id=1, name="Roadmap")
            >>> updated = session.add_idea(Idea(name="Dark mode", description="..."))
            >>> session.idea_count, updated.idea_count
            (0, 1)
        """
        bound = idea.model_copy(update={"session_id": self.id})
        return self.model_copy(update={"ideas": (*self.ideas, bound)})


__all__ = ["BrainstormSession", "Idea", "utc_now"]
