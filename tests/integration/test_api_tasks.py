"""
Integration tests for the deprecated /tarefas route and the static client.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from estoquehub.api.v1.dependencies import get_container
from estoquehub.application.use_cases.task import CreateTaskUseCase
from estoquehub.core.exceptions import DependencyError


class TestLegacyTasks:

    def test_create_task_returns_inserted_rows(self, client):
        response = client.post(
            "/tarefas",
            json={"titulo": "Count stock", "descricao": "Aisle 3", "usuario_id": 1},
        )
        assert response.status_code == 201
        rows = response.json()
        assert len(rows) == 1
        assert rows[0]["titulo"] == "Count stock"
        assert rows[0]["descricao"] == "Aisle 3"
        assert rows[0]["usuario_id"] == 1
        assert isinstance(rows[0]["id"], int)

    def test_failure_uses_error_key(self, app):
        create_task = AsyncMock(spec=CreateTaskUseCase)
        create_task.execute.side_effect = DependencyError(
            "insert failed", operation="insert_task", user_message="Error creating task."
        )
        container = MagicMock()
        container.get.return_value = create_task
        app.dependency_overrides[get_container] = lambda: container
        try:
            with TestClient(app) as c:
                response = c.post("/tarefas", json={"titulo": "x"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert response.json() == {"error": "Error creating task."}

    @pytest.mark.parametrize(
        "body",
        [
            {"titulo": "x", "usuario_id": "abc"},
            {"titulo": ["not", "a", "string"]},
        ],
    )
    def test_invalid_body_uses_error_key(self, client, body):
        response = client.post("/tarefas", json=body)
        assert response.status_code == 400
        payload = response.json()
        assert set(payload) == {"error"}
        assert payload["error"].startswith("Invalid request:")

    def test_malformed_json_uses_error_key(self, client):
        response = client.post(
            "/tarefas", content="{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert set(response.json()) == {"error"}

    def test_route_is_marked_deprecated(self, client):
        schema = client.get("/openapi.json").json()
        assert schema["paths"]["/tarefas"]["post"]["deprecated"] is True


class TestBrowserClient:

    def test_index_is_served(self, client):
        response = client.get("/app/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "screen-dashboard" in response.text

    def test_script_is_served(self, client):
        response = client.get("/app/app.js")
        assert response.status_code == 200
        assert "/products" in response.text
