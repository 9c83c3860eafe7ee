"""Administrator dashboard page (superusers only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.templating import render_page
from app.services.dashboard import build_dashboard_summary
from app.services.permissions import is_superuser
from app.web.login import get_session_user

router = APIRouter()


@router.get("/admin/dashboard", response_class=HTMLResponse)
def show_admin_dashboard(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """
    Render zone, record and user totals with the five newest zones.

    Anyone who is not a logged-in superuser is redirected to the panel root
    without any of the data.
    """
    actor = get_session_user(request, db, settings)
    if actor is None or not is_superuser(db, actor.id):
        return RedirectResponse(
            url=f"{settings.BASE_URL_PREFIX}/",
            status_code=status.HTTP_302_FOUND,
        )

    summary = build_dashboard_summary(db)
    return render_page(
        "admin_dashboard.html",
        {
            "current_page": "admin_dashboard",
            "iface_title": "Admin Control Plane",
            "total_zones": summary.total_zones,
            "total_records": summary.total_records,
            "total_users": summary.total_users,
            "recent_zones": summary.recent_zones,
            "username": actor.username,
        },
        settings,
    )
