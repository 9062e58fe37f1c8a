"""
Tests for the BrainstormSession aggregate.

These tests demonstrate:
- Testing immutability patterns (not testing frozen=True itself)
- Testing business logic (idea ordering, session binding)
"""

from brainstorm.domain import BrainstormSession, Idea


def test_new_session_has_no_ideas():
    session = BrainstormSession(name="Roadmap")

    assert session.ideas == ()  # Empty tuple, not None
    assert session.idea_count == 0


def test_add_idea_returns_new_instance(empty_session: BrainstormSession, idea: Idea):
    """
    Demonstrates: Testing immutability pattern without testing frozen=True.
    """
    updated = empty_session.add_idea(idea)

    assert updated is not empty_session
    assert updated.idea_count == 1
    assert empty_session.idea_count == 0


def test_add_idea_binds_idea_to_session(empty_session: BrainstormSession, idea: Idea):
    updated = empty_session.add_idea(idea)

    assert updated.ideas[0].session_id == empty_session.id
    # The idea passed in is untouched
    assert idea.session_id is None


def test_ideas_keep_insertion_order(empty_session: BrainstormSession):
    session = empty_session
    names = [f"Idea {i}" for i in range(5)]

    for name in names:
        session = session.add_idea(Idea(name=name, description="..."))

    assert [idea.name for idea in session.ideas] == names
