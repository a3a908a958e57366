"""Pydantic models for the read-only ``parties`` lookup table."""

from pydantic import BaseModel, ConfigDict


class Party(BaseModel):
    """Party record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PartyListResponse(BaseModel):
    """Response for GET /api/parties."""
    message: str = "success"
    data: list[Party] = []


class PartyResponse(BaseModel):
    """Response for GET /api/party/{id}."""
    message: str = "success"
    data: Party | None = None
