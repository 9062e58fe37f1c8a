"""Development seed data.

The integration tests compare API output against ``get_test_session()``, so
this is the single definition of what a freshly started development app holds.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from .model import BrainstormSession, Idea
from .repository import InMemorySessionRepository

logger = logging.getLogger(__name__)

SEED_DATE = datetime(2016, 8, 1, tzinfo=UTC)


def get_test_session() -> BrainstormSession:
    """Build the canonical (unsaved) test session with its single idea."""
    session = BrainstormSession(name="Test Session 1", date_created=SEED_DATE)
    idea = Idea(
        name="Awesome idea",
        description="Totally awesome idea",
        date_created=SEED_DATE,
    )
    return session.add_idea(idea)


async def seed_repository(repository: InMemorySessionRepository) -> None:
    """Store the test session unless the repository already holds data."""
    if await repository.list_all():
        return
    stored = await repository.add(get_test_session())
    logger.info("Seeded repository with test session %d", stored.id)


__all__ = ["SEED_DATE", "get_test_session", "seed_repository"]
