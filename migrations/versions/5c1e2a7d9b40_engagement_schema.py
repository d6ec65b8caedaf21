"""engagement schema

Revision ID: 5c1e2a7d9b40
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e2a7d9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, tags, posts, votes, comments and announcements."""
    op.create_table(
        "user_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=True),
        sa.Column("membership", sa.String(length=32), nullable=False),
        sa.Column("user_status", sa.String(length=32), nullable=False),
        sa.Column("posts", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_name", sa.Text(), nullable=False),
        sa.Column("author_email", sa.String(length=320), nullable=False),
        sa.Column("author_image", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("tag", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_author_email", "post", ["author_email"])
    op.create_index("ix_post_tag", "post", ["tag"])
    op.create_index("ix_post_created_at", "post", ["created_at"])
    op.create_table(
        "post_vote",
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("voter_email", sa.String(length=320), nullable=False),
        sa.Column("direction", sa.SmallInteger(), nullable=False),
        sa.CheckConstraint("direction IN (1, -1)", name="ck_post_vote_direction"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "voter_email"),
    )
    op.create_index("ix_post_vote_post_id", "post_vote", ["post_id"])
    op.create_table(
        "comment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("post_title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("commenter_name", sa.Text(), nullable=False),
        sa.Column("commenter_email", sa.String(length=320), nullable=False),
        sa.Column("commenter_image", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comment_post_id", "comment", ["post_id"])
    op.create_table(
        "announcement",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_name", sa.Text(), nullable=False),
        sa.Column("author_email", sa.String(length=320), nullable=False),
        sa.Column("author_image", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_announcement_created_at", "announcement", ["created_at"])
    op.create_table(
        "announcement_seen",
        sa.Column("announcement_id", sa.Integer(), nullable=False),
        sa.Column("identity", sa.String(length=320), nullable=False),
        sa.ForeignKeyConstraint(
            ["announcement_id"], ["announcement.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("announcement_id", "identity"),
    )
    op.create_index("ix_announcement_seen_identity", "announcement_seen", ["identity"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index("ix_announcement_seen_identity", table_name="announcement_seen")
    op.drop_table("announcement_seen")
    op.drop_index("ix_announcement_created_at", table_name="announcement")
    op.drop_table("announcement")
    op.drop_index("ix_comment_post_id", table_name="comment")
    op.drop_table("comment")
    op.drop_index("ix_post_vote_post_id", table_name="post_vote")
    op.drop_table("post_vote")
    op.drop_index("ix_post_created_at", table_name="post")
    op.drop_index("ix_post_tag", table_name="post")
    op.drop_index("ix_post_author_email", table_name="post")
    op.drop_table("post")
    op.drop_table("tag")
    op.drop_table("user_account")
