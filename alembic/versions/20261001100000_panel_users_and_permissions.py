"""Add panel users and permission templates; seed permission items and Administrator.

Revision ID: 20261001100000
Revises: 20261001000000
Create Date: 2026-10-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261001100000"
down_revision: Union[str, None] = "20261001000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PERMISSION_ITEMS = [
    (41, "zone_master_add", "User is allowed to add new master zones."),
    (42, "zone_slave_add", "User is allowed to add new slave zones."),
    (43, "zone_content_view_own", "User is allowed to see the content and meta data of zones he owns."),
    (44, "zone_content_edit_own", "User is allowed to edit the content of zones he owns."),
    (45, "zone_meta_edit_own", "User is allowed to edit the meta data of zones he owns."),
    (46, "zone_content_view_others", "User is allowed to see the content and meta data of zones he does not own."),
    (47, "zone_content_edit_others", "User is allowed to edit the content of zones he does not own."),
    (48, "zone_meta_edit_others", "User is allowed to edit the meta data of zones he does not own."),
    (49, "search", "User is allowed to perform searches."),
    (50, "supermaster_view", "User is allowed to view supermasters."),
    (51, "supermaster_add", "User is allowed to add new supermasters."),
    (52, "supermaster_edit", "User is allowed to edit supermasters."),
    (53, "user_is_ueberuser", "User has full access. God-like. Redeemer."),
    (54, "user_view_others", "User is allowed to see other users and their details."),
    (55, "user_add_new", "User is allowed to add new users."),
    (56, "user_edit_own", "User is allowed to edit their own details."),
    (57, "user_edit_others", "User is allowed to edit other users."),
    (58, "user_passwd_edit_others", "User is allowed to edit the password of other users."),
    (59, "user_edit_templ_perm", "User is allowed to change the permission template that is assigned to a user."),
    (60, "templ_perm_add", "User is allowed to add new permission templates."),
    (61, "templ_perm_edit", "User is allowed to edit existing permission templates."),
    (62, "zone_content_edit_own_as_client", "User is allowed to edit record, but not SOA and NS."),
]

ADMIN_TEMPLATE_ID = 1
UEBERUSER_ITEM_ID = 53


def upgrade() -> None:
    perm_items = op.create_table(
        "perm_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("descr", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    perm_templ = op.create_table(
        "perm_templ",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("descr", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    perm_templ_items = op.create_table(
        "perm_templ_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("templ_id", sa.Integer(), nullable=False),
        sa.Column("perm_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["templ_id"], ["perm_templ.id"]),
        sa.ForeignKeyConstraint(["perm_id"], ["perm_items.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_perm_templ_items_templ_id"),
        "perm_templ_items",
        ["templ_id"],
    )
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("password", sa.String(length=128), nullable=False),
        sa.Column("fullname", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("perm_templ", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("use_ldap", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("auth_method", sa.String(length=20), nullable=False, server_default="sql"),
        sa.ForeignKeyConstraint(["perm_templ"], ["perm_templ.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_users_username"),
        "users",
        ["username"],
        unique=True,
    )

    op.bulk_insert(
        perm_items,
        [{"id": i, "name": name, "descr": descr} for i, name, descr in PERMISSION_ITEMS],
    )
    op.bulk_insert(
        perm_templ,
        [{"id": ADMIN_TEMPLATE_ID, "name": "Administrator", "descr": "Administrator template with full rights."}],
    )
    op.bulk_insert(
        perm_templ_items,
        [{"id": 1, "templ_id": ADMIN_TEMPLATE_ID, "perm_id": UEBERUSER_ITEM_ID}],
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
    op.drop_index(op.f("ix_perm_templ_items_templ_id"), table_name="perm_templ_items")
    op.drop_table("perm_templ_items")
    op.drop_table("perm_templ")
    op.drop_table("perm_items")
