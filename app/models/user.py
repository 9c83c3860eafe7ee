"""ORM model for panel user accounts (Poweradmin `users` table)."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from app.models.base import Base

AUTH_METHOD_SQL = "sql"
AUTH_METHOD_LDAP = "ldap"


class User(Base):
    """
    Panel user. Authorization comes from the assigned permission template.

    password holds a bcrypt digest. auth_method is 'sql' for local credentials
    and 'ldap' for accounts whose password check is delegated.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), nullable=False, unique=True, index=True)
    password = Column(String(128), nullable=False)
    fullname = Column(String(255), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    perm_templ = Column(Integer, ForeignKey("perm_templ.id"), nullable=False)
    active = Column(Boolean, nullable=False, default=False)
    use_ldap = Column(Boolean, nullable=False, default=False)
    auth_method = Column(String(20), nullable=False, default=AUTH_METHOD_SQL)
