"""
Integration tests for GET /api/ideas/forsession/{id}.

Demonstrates:
- 404 for unknown sessions
- JSON contract (camelCase keys) for a known session
- Results line up with the seed data definition
"""

from fastapi.testclient import TestClient

from brainstorm.domain import get_test_session


def test_returns_not_found_for_bad_session_id(json_client: TestClient):
    response = json_client.get("/api/ideas/forsession/500")

    assert response.status_code == 404


def test_returns_ideas_for_valid_session_id(json_client: TestClient):
    response = json_client.get("/api/ideas/forsession/1")

    assert response.status_code == 200
    ideas = response.json()
    test_session = get_test_session()
    assert ideas[0]["name"] == test_session.ideas[0].name


def test_idea_json_uses_camel_case_fields(json_client: TestClient):
    response = json_client.get("/api/ideas/forsession/1")

    first = response.json()[0]
    assert set(first) == {"id", "name", "description", "dateCreated"}
    assert first["id"] == 1
    assert first["dateCreated"].startswith("2016-08-01")


def test_non_numeric_session_id_is_bad_request(json_client: TestClient):
    response = json_client.get("/api/ideas/forsession/abc")

    assert response.status_code == 400
