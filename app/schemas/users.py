"""Schemas for user listing and administrator-created accounts."""

from pydantic import BaseModel, ConfigDict, Field


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    fullname: str
    email: str
    perm_templ: int
    active: bool
    auth_method: str


class UsersListResponse(BaseModel):
    """Response for GET /users (superuser only)."""

    users: list[UserListItem]


class UserCreateRequest(BaseModel):
    """Account created by an authenticated administrator."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)
    fullname: str = Field(default="", max_length=255)
    email: str = Field(default="", max_length=255)
    description: str = Field(default="", max_length=1024)
    perm_templ: int = Field(..., ge=1, description="Permission template id")
    active: bool = True
