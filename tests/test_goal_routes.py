"""
Tests for goal create/list/get/delete endpoints.
"""

from __future__ import annotations

from datetime import datetime, timezone

from bson import ObjectId

from factories import goal_document


class TestCreateGoal:
    def test_create_assigns_owner_and_id(self, client, goals, auth_headers) -> None:
        payload = {"title": "Save 1000", "type": "numeric", "category": "financial", "targetValue": 1000}

        response = client.post("/api/goals", json=payload, headers=auth_headers("user-7"))

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Goal created successfully"
        assert body["goal"]["userId"] == "user-7"
        assert body["goal"]["targetValue"] == 1000
        assert ObjectId.is_valid(body["goal"]["_id"])
        assert goals.documents[0]["user_id"] == "user-7"
        assert goals.documents[0]["type"] == "numeric"

    def test_create_clamps_milestone_progress(self, client, goals, auth_headers) -> None:
        payload = {"title": "Launch site", "type": "milestone", "progress": 180}

        response = client.post("/api/goals", json=payload, headers=auth_headers())

        assert response.json()["goal"]["progress"] == 100

    def test_create_rejects_unknown_type(self, client, auth_headers) -> None:
        response = client.post("/api/goals", json={"title": "x", "type": "weekly"}, headers=auth_headers())

        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"


class TestListAndGet:
    def test_list_only_returns_own_goals_newest_first(self, client, goals, auth_headers) -> None:
        goals.seed(goal_document(title="old", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)))
        goals.seed(goal_document(title="new", created_at=datetime(2024, 2, 1, tzinfo=timezone.utc)))
        goals.seed(goal_document(user_id="someone-else", title="foreign"))

        response = client.get("/api/goals", headers=auth_headers())

        assert response.status_code == 200
        assert [g["title"] for g in response.json()["goals"]] == ["new", "old"]

    def test_list_filters_by_type(self, client, goals, auth_headers) -> None:
        goals.seed(goal_document(title="numeric"))
        goals.seed(goal_document(title="habit", type="habit"))

        response = client.get("/api/goals", params={"type": "habit"}, headers=auth_headers())

        assert [g["title"] for g in response.json()["goals"]] == ["habit"]

    def test_get_own_goal(self, client, goals, auth_headers) -> None:
        goal_id = goals.seed(goal_document())

        response = client.get(f"/api/goals/{goal_id}", headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["goal"]["_id"] == goal_id

    def test_get_foreign_goal_is_not_found(self, client, goals, auth_headers) -> None:
        goal_id = goals.seed(goal_document(user_id="someone-else"))

        response = client.get(f"/api/goals/{goal_id}", headers=auth_headers())

        assert response.status_code == 404
        assert response.json() == {"error": "Goal not found"}


class TestDeleteGoal:
    def test_delete_own_goal(self, client, goals, auth_headers) -> None:
        goal_id = goals.seed(goal_document())

        response = client.delete(f"/api/goals/{goal_id}", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {"message": "Goal deleted successfully"}
        assert goals.documents == []

    def test_delete_foreign_goal_leaves_it(self, client, goals, auth_headers) -> None:
        goal_id = goals.seed(goal_document(user_id="someone-else"))

        response = client.delete(f"/api/goals/{goal_id}", headers=auth_headers())

        assert response.status_code == 404
        assert len(goals.documents) == 1


class TestNonFiniteNumbers:
    def test_create_rejects_nan_progress(self, client, goals, auth_headers) -> None:
        headers = {**auth_headers(), "Content-Type": "application/json"}
        body = b'{"title": "x", "type": "milestone", "progress": NaN}'

        response = client.post("/api/goals", content=body, headers=headers)

        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"
        assert response.json()["details"][0]["loc"] == ["body", "progress"]
        assert goals.documents == []

    def test_create_rejects_infinite_current_value(self, client, goals, auth_headers) -> None:
        headers = {**auth_headers(), "Content-Type": "application/json"}
        body = b'{"title": "x", "type": "numeric", "currentValue": Infinity}'

        response = client.post("/api/goals", content=body, headers=headers)

        assert response.status_code == 422
        assert goals.documents == []
