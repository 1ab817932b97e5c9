"""Access control schema - role, role_permission, access_rule, action_log, patent.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("name", sa.String(50), primary_key=True),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_role_name_upper", "role", [sa.text("upper(name)")], unique=True)

    op.create_table(
        "role_permission",
        sa.Column(
            "role_name",
            sa.String(50),
            sa.ForeignKey("role.name", onupdate="CASCADE", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("permission", sa.String(50), primary_key=True),
    )

    op.create_table(
        "access_rule",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("value", sa.String(255), nullable=False),
        sa.Column("kind", sa.String(10), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("value", "kind", "role", name="uq_access_rule_value_kind_role"),
        sa.CheckConstraint("kind IN ('EMAIL', 'DOMAIN')", name="ck_access_rule_kind"),
    )
    op.create_index("ix_access_rule_value_kind", "access_rule", ["value", "kind"])
    op.create_index("ix_access_rule_role", "access_rule", ["role"])

    op.create_table(
        "action_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("actor", sa.String(255), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("target", sa.String(255), nullable=True),
        sa.Column("details", JSONB(), nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_action_log_created_at", "action_log", ["created_at"])
    op.create_index("ix_action_log_actor", "action_log", ["actor"])

    op.create_table(
        "patent",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("patentee", sa.String(255), nullable=False, server_default=""),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("status", sa.String(50), nullable=False, server_default=""),
        sa.Column("app_number", sa.String(100), nullable=False, server_default=""),
        sa.Column("annuity_date", sa.Date(), nullable=True),
        sa.Column("notification_emails", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_patent_status", "patent", ["status"])

    op.execute("""
        INSERT INTO role (name, description) VALUES
        ('ADMIN', 'Full access'),
        ('USER', 'Dashboard and patent list')
    """)
    op.execute("""
        INSERT INTO role_permission (role_name, permission)
        SELECT 'ADMIN', unnest(ARRAY[
            'view-dashboard','view-list','edit-patent','delete-patent','send-email',
            'import-data','export-data','manage-access','view-logs','ai-chat'
        ])
    """)
    op.execute("""
        INSERT INTO role_permission (role_name, permission)
        SELECT 'USER', unnest(ARRAY['view-dashboard','view-list'])
    """)


def downgrade() -> None:
    op.drop_table("patent")
    op.drop_table("action_log")
    op.drop_table("access_rule")
    op.drop_table("role_permission")
    op.drop_table("role")
