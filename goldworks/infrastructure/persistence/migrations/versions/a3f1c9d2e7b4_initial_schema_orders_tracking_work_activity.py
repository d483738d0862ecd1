"""Initial schema: orders, department tracking, work data, activity

Revision ID: a3f1c9d2e7b4
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a3f1c9d2e7b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create initial schema."""
    # Create order table
    op.create_table(
        "order",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("order_number", sa.String(length=64), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("current_department", sa.String(length=32), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('IN_FACTORY', 'COMPLETED')", name="order_status_check"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("order_number"),
    )
    op.create_index(op.f("ix_order_status"), "order", ["status"], unique=False)
    op.create_index(
        op.f("ix_order_current_department"), "order", ["current_department"], unique=False
    )

    # Create department_tracking table
    op.create_table(
        "department_tracking",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("order_id", sa.String(), nullable=False),
        sa.Column("department", sa.String(length=32), nullable=False),
        sa.Column("sequence_order", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("assigned_worker_id", sa.String(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('NOT_STARTED', 'IN_PROGRESS', 'COMPLETED')",
            name="department_tracking_status_check",
        ),
        sa.ForeignKeyConstraint(["order_id"], ["order.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "order_id", "department", name="uq_department_tracking_order_dept"
        ),
    )
    op.create_index(
        op.f("ix_department_tracking_order_id"),
        "department_tracking",
        ["order_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_department_tracking_assigned_worker_id"),
        "department_tracking",
        ["assigned_worker_id"],
        unique=False,
    )
    op.create_index(
        "ix_department_tracking_order_seq",
        "department_tracking",
        ["order_id", "sequence_order"],
        unique=False,
    )

    # Create department_work_data table
    op.create_table(
        "department_work_data",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("order_id", sa.String(), nullable=False),
        sa.Column("department", sa.String(length=32), nullable=False),
        sa.Column(
            "form_data",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'{}'::jsonb"),
            nullable=False,
        ),
        sa.Column(
            "uploaded_files",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column(
            "uploaded_photos",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column("is_draft", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "is_complete", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column("last_saved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("work_started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("work_completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("time_spent_hours", sa.Float(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["order_id"], ["order.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "order_id", "department", name="uq_department_work_data_order_dept"
        ),
    )
    op.create_index(
        op.f("ix_department_work_data_order_id"),
        "department_work_data",
        ["order_id"],
        unique=False,
    )

    # Create order_activity table (append-only)
    op.create_table(
        "order_activity",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("order_id", sa.String(), nullable=False),
        sa.Column("action", sa.String(length=32), nullable=False),
        sa.Column("actor_id", sa.String(), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "metadata",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'{}'::jsonb"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["order_id"], ["order.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_order_activity_order_created",
        "order_activity",
        ["order_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_order_activity_order_created", table_name="order_activity")
    op.drop_table("order_activity")
    op.drop_index(op.f("ix_department_work_data_order_id"), table_name="department_work_data")
    op.drop_table("department_work_data")
    op.drop_index("ix_department_tracking_order_seq", table_name="department_tracking")
    op.drop_index(
        op.f("ix_department_tracking_assigned_worker_id"), table_name="department_tracking"
    )
    op.drop_index(op.f("ix_department_tracking_order_id"), table_name="department_tracking")
    op.drop_table("department_tracking")
    op.drop_index(op.f("ix_order_current_department"), table_name="order")
    op.drop_index(op.f("ix_order_status"), table_name="order")
    op.drop_table("order")
