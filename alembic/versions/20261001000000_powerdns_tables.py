"""Create the PowerDNS gmysql backend tables (domains, records) if missing.

Hosts provisioned with the packaged pdns schema already have these tables;
the upgrade skips any table that exists.

Revision ID: 20261001000000
Revises:
Create Date: 2026-10-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261001000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade() -> None:
    if not _has_table("domains"):
        op.create_table(
            "domains",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("master", sa.String(length=128), nullable=True),
            sa.Column("last_check", sa.Integer(), nullable=True),
            sa.Column("type", sa.String(length=6), nullable=False),
            sa.Column("notified_serial", sa.Integer(), nullable=True),
            sa.Column("account", sa.String(length=40), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("name_index", "domains", ["name"], unique=True)

    if not _has_table("records"):
        op.create_table(
            "records",
            sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
            sa.Column("domain_id", sa.Integer(), nullable=True),
            sa.Column("name", sa.String(length=255), nullable=True),
            sa.Column("type", sa.String(length=10), nullable=True),
            sa.Column("content", sa.Text(), nullable=True),
            sa.Column("ttl", sa.Integer(), nullable=True),
            sa.Column("prio", sa.Integer(), nullable=True),
            sa.Column("disabled", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("ordername", sa.String(length=255), nullable=True),
            sa.Column("auth", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("nametype_index", "records", ["name", "type"])
        op.create_index("domain_id", "records", ["domain_id"])
        op.create_index("recordorder", "records", ["domain_id", "ordername"])


def downgrade() -> None:
    op.drop_index("recordorder", table_name="records")
    op.drop_index("domain_id", table_name="records")
    op.drop_index("nametype_index", table_name="records")
    op.drop_table("records")
    op.drop_index("name_index", table_name="domains")
    op.drop_table("domains")
