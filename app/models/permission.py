"""ORM models for permission templates and the permission items they grant."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.models.base import Base


class PermissionItem(Base):
    """A single named permission, e.g. 'user_add_new' or 'user_is_ueberuser'."""

    __tablename__ = "perm_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True)
    descr = Column(Text, nullable=False, default="")


class PermissionTemplate(Base):
    """Named role; users reference exactly one template."""

    __tablename__ = "perm_templ"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(128), nullable=False, unique=True)
    descr = Column(Text, nullable=False, default="")


class PermissionTemplateItem(Base):
    __tablename__ = "perm_templ_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    templ_id = Column(Integer, ForeignKey("perm_templ.id"), nullable=False, index=True)
    perm_id = Column(Integer, ForeignKey("perm_items.id"), nullable=False)
