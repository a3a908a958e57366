"""Health check endpoint.

Returns service status including database connectivity.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from candidate_api.core.errors import StorageError
from candidate_api.db.gateway import CandidateGateway
from candidate_api.routers.deps import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(gateway: CandidateGateway = Depends(get_gateway)) -> Any:
    """Return 200 when the database answers a probe query, 503 otherwise."""
    db_status = "disconnected"

    try:
        gateway.ping()
        db_status = "connected"
    except StorageError:
        logger.warning("Health check: database probe failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
