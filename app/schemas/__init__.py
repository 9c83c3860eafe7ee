"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from app.schemas.dashboard import DashboardSummary, RecentZone
from app.schemas.health import HealthResponse
from app.schemas.registration import RegistrationSubmission
from app.schemas.users import UserCreateRequest, UserListItem, UsersListResponse

__all__ = [
    "CurrentUser",
    "DashboardSummary",
    "HealthResponse",
    "LoginRequest",
    "RecentZone",
    "RegistrationSubmission",
    "TokenResponse",
    "UserCreateRequest",
    "UserListItem",
    "UsersListResponse",
]
