"""
Health Endpoint Module.

Defines the `/health` endpoint used for liveness checks by load balancers
and container orchestrators.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("", summary="Health Check", response_description="Health status of the API")
async def health_check() -> dict[str, str]:
    """
    Returns `status` "ok" and the current UTC `timestamp` in ISO 8601 format.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
