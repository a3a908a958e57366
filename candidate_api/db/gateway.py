"""Database gateway for the ``candidates`` and ``parties`` tables.

``CandidateGateway`` is the only contract route handlers depend on.
``SupabaseGateway`` implements it over the PostgREST client: each method
issues exactly one statement and converts client failures into
``StorageError``.

Read queries embed ``parties(name)`` which PostgREST resolves as a left
outer join on ``candidates.party_id``; candidates without a party are kept
and come back with ``party_name = None``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from candidate_api.core.errors import StorageError

logger = logging.getLogger(__name__)

CANDIDATES_TABLE = "candidates"
PARTIES_TABLE = "parties"

_CANDIDATE_WITH_PARTY = "*, parties(name)"


class CandidateGateway(Protocol):
    """Storage operations needed by the API."""

    def ping(self) -> None: ...

    def list_candidates(self) -> list[dict[str, Any]]: ...

    def get_candidate(self, candidate_id: int) -> dict[str, Any] | None: ...

    def create_candidate(
        self, first_name: Any, last_name: Any, industry_connected: Any
    ) -> dict[str, Any] | None: ...

    def update_candidate_party(self, candidate_id: int, party_id: Any) -> int: ...

    def delete_candidate(self, candidate_id: int) -> int: ...

    def list_parties(self) -> list[dict[str, Any]]: ...

    def get_party(self, party_id: int) -> dict[str, Any] | None: ...


def _flatten_party(row: dict[str, Any]) -> dict[str, Any]:
    """Replace the embedded ``parties`` object with a flat ``party_name``."""
    flat = dict(row)
    party = flat.pop(PARTIES_TABLE, None)
    flat["party_name"] = party.get("name") if isinstance(party, dict) else None
    return flat


class SupabaseGateway:
    """``CandidateGateway`` backed by a Supabase client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _execute(self, query: Any, operation: str) -> Any:
        try:
            return query.execute()
        except APIError as exc:
            message = exc.message or str(exc)
            logger.error(
                "storage_statement_failed",
                extra={"operation": operation, "error_message": message},
            )
            raise StorageError(message, operation) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "storage_transport_failed",
                extra={"operation": operation, "error_message": str(exc)},
            )
            raise StorageError(str(exc), operation) from exc

    def ping(self) -> None:
        """Run a one-row probe; raises ``StorageError`` when unreachable."""
        self._execute(
            self._client.table(CANDIDATES_TABLE).select("id").limit(1),
            "ping",
        )

    def list_candidates(self) -> list[dict[str, Any]]:
        result = self._execute(
            self._client.table(CANDIDATES_TABLE)
            .select(_CANDIDATE_WITH_PARTY)
            .order("id"),
            "list_candidates",
        )
        return [_flatten_party(row) for row in result.data or []]

    def get_candidate(self, candidate_id: int) -> dict[str, Any] | None:
        result = self._execute(
            self._client.table(CANDIDATES_TABLE)
            .select(_CANDIDATE_WITH_PARTY)
            .eq("id", candidate_id),
            "get_candidate",
        )
        rows = result.data or []
        if len(rows) > 1:
            logger.warning(
                "get_candidate_multiple_rows",
                extra={"candidate_id": candidate_id, "row_count": len(rows)},
            )
        return _flatten_party(rows[0]) if rows else None

    def create_candidate(
        self, first_name: Any, last_name: Any, industry_connected: Any
    ) -> dict[str, Any] | None:
        """Insert a candidate with no party; return the stored row."""
        result = self._execute(
            self._client.table(CANDIDATES_TABLE).insert(
                {
                    "first_name": first_name,
                    "last_name": last_name,
                    "industry_connected": industry_connected,
                }
            ),
            "create_candidate",
        )
        rows = result.data or []
        return rows[0] if rows else None

    def update_candidate_party(self, candidate_id: int, party_id: Any) -> int:
        """Set ``party_id`` on one candidate; return the affected-row count."""
        result = self._execute(
            self._client.table(CANDIDATES_TABLE)
            .update({"party_id": party_id})
            .eq("id", candidate_id),
            "update_candidate_party",
        )
        return len(result.data or [])

    def delete_candidate(self, candidate_id: int) -> int:
        """Delete one candidate; return the affected-row count."""
        result = self._execute(
            self._client.table(CANDIDATES_TABLE).delete().eq("id", candidate_id),
            "delete_candidate",
        )
        return len(result.data or [])

    def list_parties(self) -> list[dict[str, Any]]:
        result = self._execute(
            self._client.table(PARTIES_TABLE).select("id, name").order("id"),
            "list_parties",
        )
        return list(result.data or [])

    def get_party(self, party_id: int) -> dict[str, Any] | None:
        result = self._execute(
            self._client.table(PARTIES_TABLE).select("id, name").eq("id", party_id),
            "get_party",
        )
        rows = result.data or []
        return rows[0] if rows else None
