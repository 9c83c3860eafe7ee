"""Shared fixtures: in-memory SQLite schema and row builders."""

from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.security import hash_password
from app.models import (
    Base,
    Domain,
    PermissionItem,
    PermissionTemplate,
    PermissionTemplateItem,
    Record,
    User,
)

# Lowest bcrypt cost keeps the suite fast.
TEST_PASSWORD_COST = 4


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with every table created; shared across threads for TestClient."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "PASSWORD_COST": TEST_PASSWORD_COST,
        "ADMIN_TEMPLATE_ID": 1,
        "REGISTRATION_ENABLED": True,
    }
    values.update(overrides)
    return Settings(**values)


def mock_settings(admin_template_id: int = 1) -> MagicMock:
    settings = MagicMock()
    settings.ADMIN_TEMPLATE_ID = admin_template_id
    settings.PASSWORD_COST = TEST_PASSWORD_COST
    return settings


def add_template(db: Session, template_id: int, name: str, permissions: tuple[str, ...] = ()) -> PermissionTemplate:
    """Insert a permission template granting the named permissions (items created on demand)."""
    template = PermissionTemplate(id=template_id, name=name, descr="")
    db.add(template)
    db.flush()
    for perm_name in permissions:
        item = db.query(PermissionItem).filter(PermissionItem.name == perm_name).first()
        if item is None:
            item = PermissionItem(name=perm_name, descr="")
            db.add(item)
            db.flush()
        db.add(PermissionTemplateItem(templ_id=template.id, perm_id=item.id))
    db.commit()
    return template


def add_user(
    db: Session,
    username: str,
    perm_templ: int,
    password: str = "secret-pass",
    active: bool = True,
) -> User:
    user = User(
        username=username,
        password=hash_password(password, TEST_PASSWORD_COST),
        fullname=username.title(),
        email=f"{username}@example.com",
        description="",
        perm_templ=perm_templ,
        active=active,
        use_ldap=False,
        auth_method="sql",
    )
    db.add(user)
    db.commit()
    return user


def add_zone(db: Session, name: str, records: int = 0) -> Domain:
    domain = Domain(name=name, type="NATIVE")
    db.add(domain)
    db.flush()
    for i in range(records):
        db.add(
            Record(
                domain_id=domain.id,
                name=f"host{i}.{name}",
                type="A",
                content=f"192.0.2.{i + 1}",
                ttl=3600,
            )
        )
    db.commit()
    return domain
