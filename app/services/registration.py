"""Public self-registration: form validation, safe default role, guest account insert."""

import logging
import secrets
from collections.abc import Callable
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import USERNAME_MAX_LEN, hash_password
from app.models import User
from app.schemas.registration import RegistrationSubmission
from app.services.permissions import find_template_id_by_name, get_minimal_permission_template_id
from app.services.users import insert_guest_user, username_exists

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Templates a guest may receive, most preferred first.
PUBLIC_TEMPLATE_PREFERENCE = ("User", "Zone Manager", "Read Only")


class RegistrationError(Exception):
    """Base for every reason a registration submission is rejected."""

    default_message = "Registration failed"

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidToken(RegistrationError):
    default_message = "Invalid security token"


class MissingFields(RegistrationError):
    default_message = "All fields are required"


class UsernameTooLong(RegistrationError):
    default_message = f"Username must be at most {USERNAME_MAX_LEN} characters"


class PasswordMismatch(RegistrationError):
    default_message = "Passwords do not match"


class DuplicateUsername(RegistrationError):
    default_message = "Username already exists"


class NoPublicRoleAvailable(RegistrationError):
    default_message = "Registration unavailable (No public user role found)"


class InsertFailure(RegistrationError):
    default_message = "Registration failed. Please try again later."


def validate_csrf_token(session_token: str | None, submitted_token: str | None) -> None:
    """Raise InvalidToken unless both tokens are present and equal."""
    if not session_token or not submitted_token:
        raise InvalidToken()
    if not secrets.compare_digest(session_token.encode("utf-8"), submitted_token.encode("utf-8")):
        raise InvalidToken()


def resolve_public_template_id(
    db: Session,
    admin_template_id: int,
    minimal_template_lookup: Callable[[Session], int | None] = get_minimal_permission_template_id,
) -> int:
    """
    Pick the permission template for a self-registered account.

    Named templates are tried in PUBLIC_TEMPLATE_PREFERENCE order. Failing that,
    the minimal-privilege template is used unless it is the administrator
    template. Raises NoPublicRoleAvailable when nothing safe is found.
    """
    for name in PUBLIC_TEMPLATE_PREFERENCE:
        template_id = find_template_id_by_name(db, name)
        if template_id:
            return int(template_id)

    try:
        fallback_id = minimal_template_lookup(db)
    except SQLAlchemyError as e:
        logger.warning("Minimal permission template lookup failed: %s", e)
        raise NoPublicRoleAvailable(cause=e) from e

    if not fallback_id or int(fallback_id) == admin_template_id:
        logger.warning(
            "No public permission template available",
            extra={"fallback_template_id": fallback_id, "admin_template_id": admin_template_id},
        )
        raise NoPublicRoleAvailable()

    logger.warning(
        "No named public template found; using minimal permission template %s",
        fallback_id,
    )
    return int(fallback_id)


def register_guest(
    db: Session,
    submission: RegistrationSubmission,
    session_token: str | None,
    settings: "Settings",
) -> User:
    """
    Validate a registration submission and create the account.

    Checks run in order and stop at the first failure: token, required fields,
    username length, password confirmation, username uniqueness, default role.
    Nothing is written unless every check passes. Returns the inserted user.
    """
    validate_csrf_token(session_token, submission.token)

    username = submission.username.strip()
    fullname = submission.fullname.strip()
    email = submission.email.strip()
    password = submission.password

    if not username or not email or not password:
        raise MissingFields()

    if len(username) > USERNAME_MAX_LEN:
        raise UsernameTooLong()

    if password != submission.password_confirm:
        raise PasswordMismatch()

    if username_exists(db, username):
        raise DuplicateUsername()

    template_id = resolve_public_template_id(db, settings.ADMIN_TEMPLATE_ID)

    password_hash = hash_password(password, settings.PASSWORD_COST)
    try:
        user = insert_guest_user(
            db,
            username=username,
            password_hash=password_hash,
            fullname=fullname,
            email=email,
            perm_templ=template_id,
        )
    except IntegrityError as e:
        # The pre-check above is advisory; a concurrent insert can still win.
        logger.info("Username taken at insert time: %s", username)
        raise DuplicateUsername(cause=e) from e
    except SQLAlchemyError as e:
        logger.exception("Guest user insert failed for %s", username)
        raise InsertFailure(cause=e) from e

    logger.info(
        "User registered",
        extra={"user_id": user.id, "perm_templ": template_id},
    )
    return user
