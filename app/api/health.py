"""
Health check routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app import __version__

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness probe; does not call the downstream service"""
    return {
        "service": "social-gateway",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "downstream": request.app.state.settings.downstream_base_url,
        "version": __version__
    }
