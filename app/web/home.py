"""Panel landing page."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.templating import render_page
from app.services.permissions import is_superuser
from app.web.login import get_session_user

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def show_home(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    actor = get_session_user(request, db, settings)
    return render_page(
        "index.html",
        {
            "current_page": "index",
            "username": actor.username if actor else None,
            "show_dashboard": actor is not None and is_superuser(db, actor.id),
            "registration_enabled": settings.REGISTRATION_ENABLED,
        },
        settings,
    )
