"""Read-only party lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from candidate_api.db.gateway import CandidateGateway
from candidate_api.models.party import Party, PartyListResponse, PartyResponse
from candidate_api.routers.deps import get_gateway

router = APIRouter()


@router.get("/parties", response_model=PartyListResponse)
def list_parties(
    gateway: CandidateGateway = Depends(get_gateway),
) -> PartyListResponse:
    """Return every party, ordered by id."""
    return PartyListResponse(data=[Party(**row) for row in gateway.list_parties()])


@router.get("/party/{party_id}", response_model=PartyResponse)
def get_party(
    party_id: int,
    gateway: CandidateGateway = Depends(get_gateway),
) -> PartyResponse:
    """Return one party; ``data`` is null when the id is unknown."""
    row = gateway.get_party(party_id)
    return PartyResponse(data=Party(**row) if row is not None else None)
