"""
Health Check Endpoints

Liveness and readiness for orchestration systems. Ready means the snapshot
has been loaded.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel


router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    environment: str
    timestamp: datetime
    checks: Dict[str, Any]


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Application status with snapshot and diagram availability."""
    settings = request.app.state.settings
    load_result = getattr(request.app.state, "load_result", None)
    navigator = getattr(request.app.state, "navigator", None)
    
    checks: Dict[str, Any] = {}
    if navigator is None:
        checks["snapshot"] = {"status": "unavailable"}
        overall_status = "unhealthy"
    else:
        checks["snapshot"] = {
            "status": "healthy",
            "tables": len(navigator.snapshot),
            "records": navigator.snapshot.record_count,
        }
        if load_result is not None:
            checks["snapshot"]["file_hash"] = load_result.file_hash
        overall_status = "healthy"
    
    if request.app.state.diagram_source is None:
        checks["diagram"] = {"status": "generated"}
    else:
        checks["diagram"] = {"status": "healthy"}
    
    return HealthResponse(
        status=overall_status,
        version=settings.version,
        environment=settings.app_env,
        timestamp=datetime.now(timezone.utc),
        checks=checks,
    )


@router.get("/health/live")
async def liveness_check() -> Dict[str, str]:
    """Returns 200 if the application is running."""
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check(request: Request, response: Response) -> Dict[str, str]:
    """Returns 200 once the snapshot is loaded, 503 before."""
    if getattr(request.app.state, "navigator", None) is None:
        response.status_code = 503
        return {"status": "not_ready", "reason": "snapshot_unavailable"}
    return {"status": "ready"}
