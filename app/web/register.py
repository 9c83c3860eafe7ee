"""Public self-registration pages (GET form, POST submission)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.session import CSRF_TOKEN_KEY, ensure_csrf_token, load_session, store_session
from app.core.templating import render_page
from app.schemas.registration import RegistrationSubmission
from app.services.registration import RegistrationError, register_guest

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_registration_enabled(settings: Settings) -> None:
    if not settings.REGISTRATION_ENABLED:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


@router.get("/register", response_class=HTMLResponse)
def show_registration_form(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Render the sign-up form, creating the session's CSRF token on first visit."""
    _require_registration_enabled(settings)
    session = load_session(request, settings)
    token, created = ensure_csrf_token(session)
    response = render_page(
        "register.html",
        {"token": token, "username": "", "fullname": "", "email": ""},
        settings,
    )
    if created:
        store_session(response, session, settings)
    return response


@router.post("/register", response_class=HTMLResponse)
def submit_registration(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    username: Annotated[str, Form()] = "",
    fullname: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    password_confirm: Annotated[str, Form()] = "",
    token: Annotated[str | None, Form()] = None,
) -> Response:
    """
    Create the account and redirect to the login page, or re-render the form
    with one error message. The session is read here but never rewritten, so
    the CSRF token survives failed attempts.
    """
    _require_registration_enabled(settings)
    session_token = load_session(request, settings).get(CSRF_TOKEN_KEY)
    submission = RegistrationSubmission(
        username=username,
        fullname=fullname,
        email=email,
        password=password,
        password_confirm=password_confirm,
        token=token,
    )
    try:
        register_guest(db, submission, session_token, settings)
    except RegistrationError as e:
        logger.info("Registration rejected: %s", e.kind)
        return render_page(
            "register.html",
            {
                "error": e.message,
                "token": session_token or "",
                "username": username.strip(),
                "fullname": fullname.strip(),
                "email": email.strip(),
            },
            settings,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return RedirectResponse(
        url=f"{settings.BASE_URL_PREFIX}/login?registered=1",
        status_code=status.HTTP_302_FOUND,
    )
