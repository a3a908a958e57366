"""Candidate CRUD endpoints.

Each route issues a single gateway call and maps its outcome to JSON:

* GET    /candidates       -- all candidates, left-joined with parties
* GET    /candidate/{id}   -- one candidate (``data`` is null if absent)
* POST   /candidate        -- insert first_name, last_name, industry_connected
* PUT    /candidate/{id}   -- reassign party_id
* DELETE /candidate/{id}   -- delete by id

Update and delete report a missing id as ``{"message": "Candidate not
found"}`` with status 200.  Storage failures propagate as ``StorageError``
and are rendered by the global handlers.

Handlers are plain ``def`` so FastAPI runs the blocking client calls in its
threadpool.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from candidate_api.core.errors import ValidationError
from candidate_api.db.gateway import CandidateGateway
from candidate_api.models.candidate import (
    Candidate,
    CandidateListResponse,
    CandidateResponse,
)
from candidate_api.routers.deps import get_gateway, read_body
from candidate_api.services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter()

CREATE_REQUIRED_FIELDS = ("first_name", "last_name", "industry_connected")
UPDATE_REQUIRED_FIELDS = ("party_id",)

NOT_FOUND_MESSAGE = "Candidate not found"


@router.get("/candidates", response_model=CandidateListResponse)
def list_candidates(
    gateway: CandidateGateway = Depends(get_gateway),
) -> CandidateListResponse:
    """Return every candidate with its party name (null when unassigned)."""
    rows = gateway.list_candidates()
    return CandidateListResponse(data=[Candidate(**row) for row in rows])


@router.get("/candidate/{candidate_id}", response_model=CandidateResponse)
def get_candidate(
    candidate_id: int,
    gateway: CandidateGateway = Depends(get_gateway),
) -> CandidateResponse:
    """Return one candidate with its party name."""
    row = gateway.get_candidate(candidate_id)
    return CandidateResponse(data=Candidate(**row) if row is not None else None)


@router.post("/candidate")
def create_candidate(
    body: dict[str, Any] = Depends(read_body),
    gateway: CandidateGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Insert a candidate without a party and echo the submitted body."""
    errors = validate(body, CREATE_REQUIRED_FIELDS)
    if errors:
        raise ValidationError(errors)

    gateway.create_candidate(
        body["first_name"], body["last_name"], body["industry_connected"]
    )
    logger.info(
        "candidate_created",
        extra={"first_name": body["first_name"], "last_name": body["last_name"]},
    )
    return {"message": "success", "data": body}


@router.put("/candidate/{candidate_id}")
def update_candidate_party(
    candidate_id: int,
    body: dict[str, Any] = Depends(read_body),
    gateway: CandidateGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Reassign a candidate's party."""
    errors = validate(body, UPDATE_REQUIRED_FIELDS)
    if errors:
        raise ValidationError(errors)

    changes = gateway.update_candidate_party(candidate_id, body["party_id"])
    if not changes:
        return {"message": NOT_FOUND_MESSAGE}

    logger.info(
        "candidate_party_updated",
        extra={"candidate_id": candidate_id, "party_id": body["party_id"]},
    )
    return {"message": "success", "data": body, "changes": changes}


@router.delete("/candidate/{candidate_id}")
def delete_candidate(
    candidate_id: int,
    gateway: CandidateGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Delete a candidate by id."""
    changes = gateway.delete_candidate(candidate_id)
    if not changes:
        return {"message": NOT_FOUND_MESSAGE}

    logger.info("candidate_deleted", extra={"candidate_id": candidate_id})
    return {"message": "deleted", "changes": changes, "id": candidate_id}
