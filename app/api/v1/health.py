"""Health check endpoint with optional database connectivity check."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Return panel health and database connectivity.
    Used by the post-deploy check and load balancers.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        service=settings.IFACE_TITLE,
        environment=settings.APP_ENV,
        registration_enabled=settings.REGISTRATION_ENABLED,
        database=db_status,
    )
