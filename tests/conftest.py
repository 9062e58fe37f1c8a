"""
Shared test fixtures and configuration.

Every test that talks HTTP gets its own app from ``create_app`` and its own
``TestClient``, so no repository state leaks between tests. The client is
entered as a context manager so the app's lifespan (and seeding) runs.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Settings are read at import time; load the test env before importing the app.
ENV_FILE = Path(__file__).parent.parent / ".env.test"
load_dotenv(ENV_FILE, override=True)

from fastapi import FastAPI
from fastapi.testclient import TestClient

from brainstorm.domain import BrainstormSession, Idea
from brainstorm.hosting import ApplicationEnvironment
from brainstorm.main import create_app

CONTENT_ROOT = Path(__file__).parent.parent / "src" / "brainstorm"


@pytest.fixture
def environment() -> ApplicationEnvironment:
    """Development environment rooted at the package sources (where templates/ lives)."""
    return ApplicationEnvironment(
        application_name="brainstorm",
        application_base_path=CONTENT_ROOT.resolve(),
        environment_name="development",
    )


@pytest.fixture
def app(environment: ApplicationEnvironment) -> FastAPI:
    return create_app(environment=environment)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """In-process client; redirects are returned, not followed."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def json_client(app: FastAPI) -> Iterator[TestClient]:
    """Client that always asks for JSON, like an API consumer."""
    with TestClient(app, headers={"Accept": "application/json"}) as test_client:
        yield test_client


@pytest.fixture
def idea() -> Idea:
    return Idea(name="Offline mode", description="Keep working without a connection")


@pytest.fixture
def empty_session() -> BrainstormSession:
    return BrainstormSession(id=1, name="Roadmap")
