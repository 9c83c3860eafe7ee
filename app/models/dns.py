"""ORM models for the PowerDNS gmysql backend tables the panel reads."""

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, Text

from app.models.base import Base


class Domain(Base):
    """A DNS zone served by PowerDNS."""

    __tablename__ = "domains"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    master = Column(String(128), nullable=True)
    last_check = Column(Integer, nullable=True)
    type = Column(String(6), nullable=False)
    notified_serial = Column(Integer, nullable=True)
    account = Column(String(40), nullable=True)


class Record(Base):
    """A resource record belonging to a zone."""

    __tablename__ = "records"

    # BigInteger does not autoincrement on SQLite; the variant keeps tests on INTEGER PRIMARY KEY.
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    domain_id = Column(Integer, nullable=True, index=True)
    name = Column(String(255), nullable=True)
    type = Column(String(10), nullable=True)
    content = Column(Text, nullable=True)
    ttl = Column(Integer, nullable=True)
    prio = Column(Integer, nullable=True)
    disabled = Column(Boolean, nullable=False, default=False)
    ordername = Column(String(255), nullable=True)
    auth = Column(Boolean, nullable=False, default=True)
