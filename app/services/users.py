"""User account operations: guest insert, administrator create, credential check."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models import PermissionTemplate, User
from app.models.user import AUTH_METHOD_SQL
from app.schemas.auth import CurrentUser
from app.schemas.users import UserCreateRequest
from app.services.permissions import is_superuser, user_has_permission

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

GUEST_USER_DESCRIPTION = "Registered via public registration"
USER_ADD_PERMISSION = "user_add_new"


class UserServiceError(Exception):
    """Raised when an administrator user operation is refused."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PermissionDeniedError(UserServiceError):
    pass


class UserExistsError(UserServiceError):
    pass


class UnknownTemplateError(UserServiceError):
    pass


def username_exists(db: Session, username: str) -> bool:
    return db.query(User.id).filter(User.username == username).first() is not None


def insert_guest_user(
    db: Session,
    *,
    username: str,
    password_hash: str,
    fullname: str,
    email: str,
    perm_templ: int,
) -> User:
    """
    Insert an account created through public registration.

    Only the registration flow calls this. The row is always active, uses local
    credentials and carries the fixed guest description; callers cannot set
    any other column. Storage errors propagate after a rollback.
    """
    user = User(
        username=username,
        password=password_hash,
        fullname=fullname,
        email=email,
        description=GUEST_USER_DESCRIPTION,
        perm_templ=perm_templ,
        active=True,
        use_ldap=False,
        auth_method=AUTH_METHOD_SQL,
    )
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    return user


def administrator_create_user(
    db: Session,
    actor: CurrentUser,
    body: UserCreateRequest,
    settings: "Settings",
) -> User:
    """
    Create an account on behalf of an authenticated administrator.

    Requires the user_add_new permission; assigning the Administrator template
    additionally requires the actor to be a superuser.
    """
    if not user_has_permission(db, actor.id, USER_ADD_PERMISSION):
        raise PermissionDeniedError("You do not have permission to add users.")

    template = db.get(PermissionTemplate, body.perm_templ)
    if template is None:
        raise UnknownTemplateError(f"Permission template {body.perm_templ} does not exist.")
    if template.id == settings.ADMIN_TEMPLATE_ID and not is_superuser(db, actor.id):
        raise PermissionDeniedError("Only superusers may assign the administrator template.")

    username = body.username.strip()
    if not username:
        raise UserServiceError("Username must not be empty.")
    if username_exists(db, username):
        raise UserExistsError(f"User '{username}' already exists.")

    user = User(
        username=username,
        password=hash_password(body.password, settings.PASSWORD_COST),
        fullname=body.fullname.strip(),
        email=body.email.strip(),
        description=body.description,
        perm_templ=template.id,
        active=body.active,
        use_ldap=False,
        auth_method=AUTH_METHOD_SQL,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UserExistsError(f"User '{username}' already exists.") from e
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(
        "User created by administrator",
        extra={"actor_id": actor.id, "user_id": user.id, "perm_templ": user.perm_templ},
    )
    return user


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """Return the active local-credential user matching username and password, else None."""
    user = db.query(User).filter(User.username == username).first()
    if user is None or not user.active or user.auth_method != AUTH_METHOD_SQL:
        return None
    if not verify_password(password, user.password):
        return None
    return user
