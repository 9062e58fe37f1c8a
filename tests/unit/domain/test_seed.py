"""Tests for the development seed data."""

import pytest

from brainstorm.domain import BrainstormSession, InMemorySessionRepository, get_test_session, seed_repository


def test_test_session_has_one_awesome_idea():
    session = get_test_session()

    assert session.name == "Test Session 1"
    assert [idea.name for idea in session.ideas] == ["Awesome idea"]
    assert session.ideas[0].description == "Totally awesome idea"


@pytest.mark.asyncio
async def test_seed_stores_test_session_as_session_one():
    repository = InMemorySessionRepository()

    await seed_repository(repository)

    stored = await repository.get_by_id(1)
    assert stored is not None
    assert stored.name == get_test_session().name


@pytest.mark.asyncio
async def test_seed_leaves_populated_repository_alone():
    repository = InMemorySessionRepository()
    await repository.add(BrainstormSession(name="Existing"))

    await seed_repository(repository)

    assert [s.name for s in await repository.list_all()] == ["Existing"]
