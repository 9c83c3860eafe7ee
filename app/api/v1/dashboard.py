"""Superuser dashboard summary as JSON."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import require_superuser
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.dashboard import DashboardSummary
from app.services.dashboard import build_dashboard_summary

router = APIRouter()


@router.get("", response_model=DashboardSummary)
def get_dashboard(
    _admin: Annotated[CurrentUser, Depends(require_superuser)],
    db: Annotated[Session, Depends(get_db)],
) -> DashboardSummary:
    """Zone, record and user totals plus the five newest zones."""
    return build_dashboard_summary(db)
