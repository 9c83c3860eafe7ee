"""Permission lookups: template resolution, superuser check and per-permission checks."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import PermissionItem, PermissionTemplate, PermissionTemplateItem, User

logger = logging.getLogger(__name__)

# Holding this permission grants every other permission.
UEBERUSER_PERMISSION = "user_is_ueberuser"


def find_template_id_by_name(db: Session, name: str) -> int | None:
    """Return the id of the permission template with exactly this name, if any."""
    return (
        db.query(PermissionTemplate.id)
        .filter(PermissionTemplate.name == name)
        .scalar()
    )


def get_minimal_permission_template_id(db: Session) -> int | None:
    """
    Return the template granting the fewest permission items.

    Ties go to the lowest id. Returns None when no templates exist.
    """
    row = (
        db.query(PermissionTemplate.id)
        .outerjoin(PermissionTemplateItem, PermissionTemplateItem.templ_id == PermissionTemplate.id)
        .group_by(PermissionTemplate.id)
        .order_by(func.count(PermissionTemplateItem.id).asc(), PermissionTemplate.id.asc())
        .first()
    )
    return row[0] if row is not None else None


def template_permissions(db: Session, template_id: int) -> set[str]:
    rows = (
        db.query(PermissionItem.name)
        .join(PermissionTemplateItem, PermissionTemplateItem.perm_id == PermissionItem.id)
        .filter(PermissionTemplateItem.templ_id == template_id)
        .all()
    )
    return {name for (name,) in rows}


def user_has_permission(db: Session, user_id: int, permission: str) -> bool:
    """
    True when the user exists, is active, and their template grants the
    permission (directly or through the ueberuser permission).
    """
    user = db.query(User.perm_templ, User.active).filter(User.id == user_id).first()
    if user is None or not user.active:
        return False
    granted = template_permissions(db, user.perm_templ)
    return UEBERUSER_PERMISSION in granted or permission in granted


def is_superuser(db: Session, user_id: int) -> bool:
    """True when the user holds the highest privilege tier (ueberuser)."""
    return user_has_permission(db, user_id, UEBERUSER_PERMISSION)
