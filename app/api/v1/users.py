"""User administration endpoints (list, administrator create)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_superuser
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.models import User
from app.schemas.auth import CurrentUser
from app.schemas.users import UserCreateRequest, UserListItem, UsersListResponse
from app.services.users import (
    PermissionDeniedError,
    UserExistsError,
    UserServiceError,
    administrator_create_user,
)

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_superuser)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (superuser only)."""
    users = db.query(User).order_by(User.id).all()
    return UsersListResponse(users=[UserListItem.model_validate(u) for u in users])


@router.post("", response_model=UserListItem, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserListItem:
    """
    Create a user as an authenticated administrator (requires user_add_new).

    This is the only API path that can choose a permission template; public
    self-registration never goes through it.
    """
    try:
        user = administrator_create_user(db, current_user, body, settings)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from e
    except UserExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except UserServiceError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message) from e
    return UserListItem.model_validate(user)
