"""Shared test fixtures.

Seeds the required Supabase settings, and provides an in-memory
``CandidateGateway`` plus a FastAPI ``TestClient`` wired to it.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

from candidate_api.core.errors import StorageError  # noqa: E402


class InMemoryGateway:
    """``CandidateGateway`` over plain dicts, with left-join reads.

    Set ``fail_with`` to a ``StorageError`` to make every call raise it.
    """

    def __init__(self) -> None:
        self.parties: dict[int, dict[str, Any]] = {
            1: {"id": 1, "name": "JS Junkies"},
            2: {"id": 2, "name": "Heroes of HTML"},
        }
        self.candidates: dict[int, dict[str, Any]] = {}
        self.fail_with: StorageError | None = None
        self._next_id = 1

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _joined(self, row: dict[str, Any]) -> dict[str, Any]:
        party = self.parties.get(row["party_id"]) if row["party_id"] is not None else None
        return {**row, "party_name": party["name"] if party else None}

    def add_candidate(
        self,
        first_name: str,
        last_name: str,
        industry_connected: bool = False,
        party_id: int | None = None,
    ) -> int:
        candidate_id = self._next_id
        self._next_id += 1
        self.candidates[candidate_id] = {
            "id": candidate_id,
            "first_name": first_name,
            "last_name": last_name,
            "industry_connected": industry_connected,
            "party_id": party_id,
        }
        return candidate_id

    def ping(self) -> None:
        self._check()

    def list_candidates(self) -> list[dict[str, Any]]:
        self._check()
        return [self._joined(row) for _, row in sorted(self.candidates.items())]

    def get_candidate(self, candidate_id: int) -> dict[str, Any] | None:
        self._check()
        row = self.candidates.get(candidate_id)
        return self._joined(row) if row else None

    def create_candidate(
        self, first_name: Any, last_name: Any, industry_connected: Any
    ) -> dict[str, Any] | None:
        self._check()
        candidate_id = self.add_candidate(first_name, last_name, industry_connected)
        return dict(self.candidates[candidate_id])

    def update_candidate_party(self, candidate_id: int, party_id: Any) -> int:
        self._check()
        row = self.candidates.get(candidate_id)
        if row is None:
            return 0
        row["party_id"] = party_id
        return 1

    def delete_candidate(self, candidate_id: int) -> int:
        self._check()
        return 1 if self.candidates.pop(candidate_id, None) else 0

    def list_parties(self) -> list[dict[str, Any]]:
        self._check()
        return [dict(p) for _, p in sorted(self.parties.items())]

    def get_party(self, party_id: int) -> dict[str, Any] | None:
        self._check()
        party = self.parties.get(party_id)
        return dict(party) if party else None


@pytest.fixture()
def gateway() -> InMemoryGateway:
    """Provide an empty in-memory gateway with two parties."""
    return InMemoryGateway()


@pytest.fixture()
def test_client(gateway: InMemoryGateway) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the in-memory gateway."""
    from candidate_api.main import create_app

    with TestClient(create_app(gateway=gateway)) as client:
        yield client
