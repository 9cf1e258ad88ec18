from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from core.config import settings
import db

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
async def health():
    """Liveness/readiness check"""
    connected = db.check_connection()
    body = {
        "status": "healthy" if connected else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if connected else "disconnected",
        "environment": settings.environment,
    }
    return JSONResponse(status_code=200 if connected else 503, content=body)
