"""Initial story idea schema

Revision ID: 3c1f0a7d9e21
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a7d9e21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLES = ("amitrace_admin", "teacher", "student")
APPROVAL_STATUSES = ("draft", "pending", "approved", "rejected")


def upgrade() -> None:
    """Create users, story_ideas, tags, interviewees and their links."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.Enum(*USER_ROLES, name="userrole"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("username != ''", name="ck_user_non_empty_username"),
        sa.CheckConstraint("email != ''", name="ck_user_non_empty_email"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tag_name", sa.String(length=255), nullable=False),
        sa.Column(
            "created_by",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("tag_name != ''", name="ck_non_empty_tag"),
    )
    op.create_index("ix_tags_tag_name", "tags", ["tag_name"], unique=True)

    op.create_table(
        "interviewees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("name != ''", name="ck_non_empty_interviewee"),
    )
    op.create_index("ix_interviewees_name", "interviewees", ["name"])

    op.create_table(
        "story_ideas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("idea_title", sa.String(length=255), nullable=False),
        sa.Column("idea_description", sa.Text(), nullable=True),
        sa.Column("question_1", sa.Text(), nullable=True),
        sa.Column("question_2", sa.Text(), nullable=True),
        sa.Column("question_3", sa.Text(), nullable=True),
        sa.Column("question_4", sa.Text(), nullable=True),
        sa.Column("question_5", sa.Text(), nullable=True),
        sa.Column("question_6", sa.Text(), nullable=True),
        sa.Column("coverage_start_date", sa.Date(), nullable=True),
        sa.Column("coverage_end_date", sa.Date(), nullable=True),
        sa.Column(
            "uploaded_by",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("uploaded_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "approval_status",
            sa.Enum(*APPROVAL_STATUSES, name="approvalstatus"),
            nullable=False,
        ),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "approved_by",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.CheckConstraint("idea_title != ''", name="ck_story_non_empty_title"),
        sa.CheckConstraint(
            "coverage_end_date IS NULL OR coverage_start_date IS NOT NULL",
            name="ck_story_end_requires_start",
        ),
    )
    op.create_index("ix_story_ideas_idea_title", "story_ideas", ["idea_title"])
    op.create_index(
        "ix_story_ideas_coverage_start_date", "story_ideas", ["coverage_start_date"]
    )
    op.create_index("ix_story_ideas_uploaded_by", "story_ideas", ["uploaded_by"])
    op.create_index(
        "ix_story_ideas_approval_status", "story_ideas", ["approval_status"]
    )

    op.create_table(
        "story_tags",
        sa.Column(
            "story_id",
            sa.Integer(),
            sa.ForeignKey("story_ideas.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            sa.Integer(),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "story_interviewees",
        sa.Column(
            "story_id",
            sa.Integer(),
            sa.ForeignKey("story_ideas.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "interviewee_id",
            sa.Integer(),
            sa.ForeignKey("interviewees.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def downgrade() -> None:
    """Drop the story idea schema."""
    op.drop_table("story_interviewees")
    op.drop_table("story_tags")
    op.drop_index("ix_story_ideas_approval_status", table_name="story_ideas")
    op.drop_index("ix_story_ideas_uploaded_by", table_name="story_ideas")
    op.drop_index("ix_story_ideas_coverage_start_date", table_name="story_ideas")
    op.drop_index("ix_story_ideas_idea_title", table_name="story_ideas")
    op.drop_table("story_ideas")
    op.drop_index("ix_interviewees_name", table_name="interviewees")
    op.drop_table("interviewees")
    op.drop_index("ix_tags_tag_name", table_name="tags")
    op.drop_table("tags")
    op.drop_table("users")
