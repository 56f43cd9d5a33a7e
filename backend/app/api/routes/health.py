"""Health Probes — is the process up, and can the user directory be served?

Invariants:
    - GET /api/health/ answers 200 whenever the process runs
    - GET /api/health/ready answers 200 only when the users table can be
      queried; otherwise 503 with store "unreachable"
    - Neither probe touches user rows or returns user data
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import app.infrastructure.database as database

SERVICE_NAME = "user-directory"

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    """Ready when GET /api/users would reach a migrated store."""
    manager = database.db_manager
    store_ok = manager is not None and await manager.health_check()
    body = {
        "service": SERVICE_NAME,
        "ready": store_ok,
        "store": "ok" if store_ok else "unreachable",
    }
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body,
        )
    return body
