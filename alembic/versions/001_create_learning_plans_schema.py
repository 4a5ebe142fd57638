"""Create users, follows and learning plan tree tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("(CURRENT_TIMESTAMP)"),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("follower_count", sa.Integer(), nullable=False),
        sa.Column("following_count", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)

    op.create_table(
        "user_follows",
        sa.Column("follower_id", sa.Integer(), nullable=False),
        sa.Column("followed_id", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followed_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("follower_id", "followed_id"),
    )
    op.create_index(
        op.f("ix_user_follows_followed_id"), "user_follows", ["followed_id"], unique=False
    )

    op.create_table(
        "learning_plans",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("estimated_hours", sa.Integer(), nullable=False),
        sa.Column("completed_hours", sa.Integer(), nullable=False),
        sa.Column("is_template", sa.Boolean(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_learning_plans_id"), "learning_plans", ["id"], unique=False)
    op.create_index(op.f("ix_learning_plans_user_id"), "learning_plans", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_learning_plans_category"), "learning_plans", ["category"], unique=False
    )
    op.create_index(
        op.f("ix_learning_plans_is_template"), "learning_plans", ["is_template"], unique=False
    )

    op.create_table(
        "learning_modules",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("estimated_hours", sa.Integer(), nullable=False),
        sa.Column("completed_hours", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["plan_id"], ["learning_plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_learning_modules_plan_id"), "learning_modules", ["plan_id"], unique=False
    )

    op.create_table(
        "learning_tasks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("module_id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("estimated_minutes", sa.Integer(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["module_id"], ["learning_modules.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_learning_tasks_module_id"), "learning_tasks", ["module_id"], unique=False
    )

    op.create_table(
        "learning_resources",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("task_id", sa.Uuid(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["task_id"], ["learning_tasks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_learning_resources_task_id"), "learning_resources", ["task_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f("ix_learning_resources_task_id"), table_name="learning_resources")
    op.drop_table("learning_resources")
    op.drop_index(op.f("ix_learning_tasks_module_id"), table_name="learning_tasks")
    op.drop_table("learning_tasks")
    op.drop_index(op.f("ix_learning_modules_plan_id"), table_name="learning_modules")
    op.drop_table("learning_modules")
    op.drop_index(op.f("ix_learning_plans_is_template"), table_name="learning_plans")
    op.drop_index(op.f("ix_learning_plans_category"), table_name="learning_plans")
    op.drop_index(op.f("ix_learning_plans_user_id"), table_name="learning_plans")
    op.drop_index(op.f("ix_learning_plans_id"), table_name="learning_plans")
    op.drop_table("learning_plans")
    op.drop_index(op.f("ix_user_follows_followed_id"), table_name="user_follows")
    op.drop_table("user_follows")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
