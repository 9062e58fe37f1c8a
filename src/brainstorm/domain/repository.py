"""In-memory session repository.

One repository lives on each application instance (``app.state``), which is
what keeps tests isolated from each other: every test builds its own app and
therefore its own store.
"""

from __future__ import annotations

import asyncio
import logging

from .model import BrainstormSession, Idea

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when updating a session the repository has never stored."""

    def __init__(self, session_id: int):
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class InMemorySessionRepository:
    """Dictionary-backed store for brainstorm sessions.

    Session ids start at 1 and increase per repository. Idea ids are unique
    across the whole repository, not just within a session.
    """

    def __init__(self) -> None:
        self._sessions: dict[int, BrainstormSession] = {}
        self._next_session_id = 1
        self._next_idea_id = 1
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[BrainstormSession]:
        async with self._lock:
            return [self._sessions[key] for key in sorted(self._sessions)]

    async def get_by_id(self, session_id: int) -> BrainstormSession | None:
        async with self._lock:
            return self._sessions.get(session_id)

    async def add(self, session: BrainstormSession) -> BrainstormSession:
        async with self._lock:
            stored = self._assign_idea_ids(session.model_copy(update={"id": self._next_session_id}))
            self._next_session_id += 1
            self._sessions[stored.id] = stored
        logger.info("Stored session %d (%s)", stored.id, stored.name)
        return stored

    async def update(self, session: BrainstormSession) -> BrainstormSession:
        async with self._lock:
            if session.id not in self._sessions:
                raise SessionNotFoundError(session.id)
            stored = self._assign_idea_ids(session)
            self._sessions[stored.id] = stored
        return stored

    async def add_idea(self, session_id: int, idea: Idea) -> BrainstormSession:
        """Append an idea to a stored session as one step under the lock."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFoundError(session_id)
            stored = self._assign_idea_ids(session.add_idea(idea))
            self._sessions[stored.id] = stored
        return stored

    def _assign_idea_ids(self, session: BrainstormSession) -> BrainstormSession:
        # Caller holds the lock.
        ideas: list[Idea] = []
        for idea in session.ideas:
            update: dict[str, int] = {"session_id": session.id}
            if idea.id == 0:
                update["id"] = self._next_idea_id
                self._next_idea_id += 1
            ideas.append(idea.model_copy(update=update))
        return session.model_copy(update={"ideas": tuple(ideas)})


__all__ = ["InMemorySessionRepository", "SessionNotFoundError"]
