"""Login and logout pages backed by the signed session cookie."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.session import (
    CSRF_TOKEN_KEY,
    USER_ID_KEY,
    clear_session,
    ensure_csrf_token,
    get_session_user_id,
    load_session,
    store_session,
)
from app.core.templating import render_page
from app.models import User
from app.schemas.auth import CurrentUser
from app.services.permissions import is_superuser
from app.services.registration import InvalidToken, validate_csrf_token
from app.services.users import authenticate_user

logger = logging.getLogger(__name__)
router = APIRouter()

REGISTERED_NOTICE = "Registration successful. You can now log in."
LOGIN_FAILED_MESSAGE = "Invalid username or password."


def get_session_user(request: Request, db: Session, settings: Settings) -> CurrentUser | None:
    """Return the active user stored in the request's session, if any."""
    user_id = get_session_user_id(load_session(request, settings))
    if user_id is None:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.active:
        return None
    return CurrentUser.model_validate(user)


@router.get("/login", response_class=HTMLResponse)
def show_login_form(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    registered: str | None = None,
) -> Response:
    session = load_session(request, settings)
    token, created = ensure_csrf_token(session)
    response = render_page(
        "login.html",
        {
            "token": token,
            "username": "",
            "notice": REGISTERED_NOTICE if registered == "1" else None,
        },
        settings,
    )
    if created:
        store_session(response, session, settings)
    return response


@router.post("/login", response_class=HTMLResponse)
def submit_login(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    token: Annotated[str | None, Form()] = None,
) -> Response:
    """Check the form token and credentials, then store the user id in the session."""
    session = load_session(request, settings)
    session_token = session.get(CSRF_TOKEN_KEY)
    try:
        validate_csrf_token(session_token, token)
    except InvalidToken as e:
        return render_page(
            "login.html",
            {"error": e.message, "token": session_token or "", "username": username.strip()},
            settings,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    user = authenticate_user(db, username.strip(), password)
    if user is None:
        logger.info("Failed login for %s", username.strip())
        return render_page(
            "login.html",
            {"error": LOGIN_FAILED_MESSAGE, "token": session_token, "username": username.strip()},
            settings,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    session[USER_ID_KEY] = user.id
    target = "/admin/dashboard" if is_superuser(db, user.id) else "/"
    response = RedirectResponse(
        url=f"{settings.BASE_URL_PREFIX}{target}",
        status_code=status.HTTP_302_FOUND,
    )
    store_session(response, session, settings)
    return response


@router.get("/logout")
def logout(settings: Annotated[Settings, Depends(get_settings)]) -> Response:
    response = RedirectResponse(
        url=f"{settings.BASE_URL_PREFIX}/login",
        status_code=status.HTTP_302_FOUND,
    )
    clear_session(response, settings)
    return response
