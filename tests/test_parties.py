"""Endpoint tests for the read-only party routes."""

from typing import Any

from fastapi.testclient import TestClient

from candidate_api.core.errors import StorageError


class TestParties:

    def test_list_parties(self, test_client: TestClient) -> None:
        response = test_client.get("/api/parties")
        assert response.status_code == 200
        assert response.json() == {
            "message": "success",
            "data": [
                {"id": 1, "name": "JS Junkies"},
                {"id": 2, "name": "Heroes of HTML"},
            ],
        }

    def test_get_party(self, test_client: TestClient) -> None:
        response = test_client.get("/api/party/2")
        assert response.status_code == 200
        assert response.json()["data"] == {"id": 2, "name": "Heroes of HTML"}

    def test_get_absent_party(self, test_client: TestClient) -> None:
        response = test_client.get("/api/party/77")
        assert response.status_code == 200
        assert response.json() == {"message": "success", "data": None}

    def test_no_party_mutation_routes(self, test_client: TestClient) -> None:
        for response in (
            test_client.delete("/api/party/1"),
            test_client.put("/api/party/1", json={"name": "Renamed"}),
            test_client.post("/api/parties", json={"name": "New"}),
        ):
            assert response.status_code == 404
            assert response.content == b""

    def test_storage_failure_returns_500(
        self, test_client: TestClient, gateway: Any
    ) -> None:
        gateway.fail_with = StorageError("connection reset")
        response = test_client.get("/api/parties")
        assert response.status_code == 500
        assert response.json() == {"error": "connection reset"}
