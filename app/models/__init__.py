"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.dns import Domain, Record
from app.models.permission import PermissionItem, PermissionTemplate, PermissionTemplateItem
from app.models.user import User

__all__ = [
    "Base",
    "Domain",
    "PermissionItem",
    "PermissionTemplate",
    "PermissionTemplateItem",
    "Record",
    "User",
]
