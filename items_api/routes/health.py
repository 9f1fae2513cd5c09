"""
Items API — Health Check Route
===============================

What:  Liveness endpoint for load balancers and container health checks.
How:   Always answers {"status": "ok"} while the process can serve requests.
       Database reachability is not part of it: the database is only probed
       once at startup (see database.py) and never gates serving.
"""

from fastapi import APIRouter

from items_api.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
