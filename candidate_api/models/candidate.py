"""Pydantic models for the ``candidates`` table.

``party_name`` is not a column: it comes from the left join against
``parties`` and is ``None`` for candidates without a party.
"""

from pydantic import BaseModel, ConfigDict


class Candidate(BaseModel):
    """Candidate record as returned by the read routes."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    industry_connected: bool
    party_id: int | None = None
    party_name: str | None = None


class CandidateListResponse(BaseModel):
    """Response for GET /api/candidates."""
    message: str = "success"
    data: list[Candidate] = []


class CandidateResponse(BaseModel):
    """Response for GET /api/candidate/{id}; ``data`` is null when absent."""
    message: str = "success"
    data: Candidate | None = None
