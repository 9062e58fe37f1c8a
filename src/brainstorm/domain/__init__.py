"""Domain Layer - brainstorm sessions, ideas and their in-memory store.

Key Components:
    - BrainstormSession: Aggregate root holding an ordered tuple of ideas
    - Idea: A single captured idea
    - InMemorySessionRepository: Per-application store that assigns ids
    - get_test_session/seed_repository: Development seed data

Design Principles:
    - Immutable by Default: models use frozen=True, updates return new instances
    - Explicit Dependencies: the repository is handed to whoever needs it
"""

from .model import BrainstormSession, Idea
from .repository import InMemorySessionRepository, SessionNotFoundError
from .seed import get_test_session, seed_repository

__all__ = [
    "BrainstormSession",
    "Idea",
    "InMemorySessionRepository",
    "SessionNotFoundError",
    "get_test_session",
    "seed_repository",
]
