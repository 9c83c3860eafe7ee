"""Browser session carried in a signed cookie: CSRF token and logged-in user id."""

import logging
from typing import TYPE_CHECKING, Any

import jwt
from fastapi import Request, Response

from app.core.security import decode_session, encode_session, generate_csrf_token

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

CSRF_TOKEN_KEY = "token"
USER_ID_KEY = "user_id"


def _cookie_path(settings: "Settings") -> str:
    return settings.BASE_URL_PREFIX or "/"


def load_session(request: Request, settings: "Settings") -> dict[str, Any]:
    """Return the session data from the request cookie, or an empty dict when absent or invalid."""
    raw = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not raw:
        return {}
    try:
        return decode_session(raw, settings)
    except jwt.PyJWTError as e:
        logger.info("Discarding invalid session cookie: %s", e)
        return {}


def store_session(response: Response, data: dict[str, Any], settings: "Settings") -> None:
    """Write session data to the response as a signed, HTTP-only cookie."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=encode_session(data, settings),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        path=_cookie_path(settings),
        httponly=True,
        samesite="lax",
        secure=settings.APP_ENV == "prod",
    )


def clear_session(response: Response, settings: "Settings") -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path=_cookie_path(settings))


def ensure_csrf_token(session: dict[str, Any]) -> tuple[str, bool]:
    """
    Return the session's CSRF token, generating one if the session has none.

    The second element is True when a token was created and the session must be stored.
    """
    token = session.get(CSRF_TOKEN_KEY)
    if isinstance(token, str) and token:
        return token, False
    token = generate_csrf_token()
    session[CSRF_TOKEN_KEY] = token
    return token, True


def get_session_user_id(session: dict[str, Any]) -> int | None:
    value = session.get(USER_ID_KEY)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
