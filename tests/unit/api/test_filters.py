"""
Tests for the route filters, on a throwaway app.

Demonstrates:
- Exception filters only react to unexpected errors
- The action filter adds its header to successful responses
"""

import logging
from collections.abc import Iterator

import pytest
from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient

from brainstorm.api.filters import ExceptionLoggingRoute, add_header


@pytest.fixture
def filtered_client() -> Iterator[TestClient]:
    router = APIRouter(route_class=ExceptionLoggingRoute)

    @router.get("/ok", dependencies=[Depends(add_header("X-Filtered", "yes"))])
    async def ok() -> dict:
        return {"ok": True}

    @router.get("/missing")
    async def missing() -> dict:
        raise HTTPException(status_code=404, detail="nope")

    @router.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("kaput")

    app = FastAPI()
    app.include_router(router)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_action_filter_adds_header_on_success(filtered_client: TestClient):
    response = filtered_client.get("/ok")

    assert response.status_code == 200
    assert response.headers["X-Filtered"] == "yes"


def test_http_exceptions_pass_through_without_logging(
    filtered_client: TestClient, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.ERROR, logger="brainstorm.api.filters"):
        response = filtered_client.get("/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "nope"}
    assert not [r for r in caplog.records if r.name == "brainstorm.api.filters"]


def test_unexpected_exception_is_logged_with_type(
    filtered_client: TestClient, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.ERROR, logger="brainstorm.api.filters"):
        response = filtered_client.get("/boom")

    assert response.status_code == 500
    messages = [r.getMessage() for r in caplog.records if r.name == "brainstorm.api.filters"]
    assert messages == ["Unhandled RuntimeError in GET /boom: kaput"]
