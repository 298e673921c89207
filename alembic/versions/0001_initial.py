"""Initial schema: users/recruiters, testimonials, jobs, gallery and likes, media, Q&A, comments

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # users: one table for User and Recruiter, discriminated by role
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("username", sa.String(80), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("date_joined", sa.DateTime),
        sa.Column("biography", sa.Text),
        sa.Column("profile_picture", sa.Text),
        sa.Column("banner_image", sa.Text),
        sa.Column("resume_file", sa.Text),
        sa.Column("skills", sa.JSON),
        sa.Column("portfolio_models", sa.JSON),
        sa.Column("portfolio_thumbnails", sa.JSON),
        sa.Column("external_links", sa.JSON),
        sa.Column("custom_colors", sa.JSON),
        sa.Column("custom_font", sa.String(120)),
        sa.Column("company", sa.String(200)),
        *_timestamps(),
        sa.CheckConstraint("role != 'Recruiter' OR company IS NOT NULL", name="ck_users_recruiter_company"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "testimonials",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("profile_user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("from_user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="SET NULL")),
        sa.Column("from_username", sa.String(80), nullable=False),
        sa.Column("from_profile_picture", sa.Text),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.Column("approved", sa.Boolean, nullable=False),
        sa.UniqueConstraint("profile_user_id", "from_username", name="uq_testimonials_profile_author"),
    )
    op.create_index("ix_testimonials_profile_user_id", "testimonials", ["profile_user_id"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("recruiter_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("posted_at", sa.DateTime, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_jobs_recruiter_id", "jobs", ["recruiter_id"])

    op.create_table(
        "gallery_posts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("user", sa.String(80), nullable=False),
        sa.Column("media", sa.Text),
        sa.Column("thumbnail_media", sa.Text),
        sa.Column("community", sa.String(120), nullable=False),
        sa.Column("post_date_time", sa.DateTime, nullable=False),
        sa.Column("views", sa.Integer, nullable=False),
        sa.Column("downloads", sa.Integer, nullable=False),
        sa.Column("media_size", sa.String(64)),
        sa.Column("tags", sa.JSON),
        sa.Column("link", sa.String(500)),
        *_timestamps(),
    )
    op.create_index("ix_gallery_posts_user", "gallery_posts", ["user"])
    op.create_index("ix_gallery_posts_community", "gallery_posts", ["community"])
    op.create_index("ix_gallery_posts_post_date_time", "gallery_posts", ["post_date_time"])

    op.create_table(
        "gallery_likes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("post_id", sa.Integer, sa.ForeignKey("gallery_posts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("username", sa.String(80), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.UniqueConstraint("post_id", "username", name="uq_gallery_likes_post_user"),
    )
    op.create_index("ix_gallery_likes_post_id", "gallery_likes", ["post_id"])

    op.create_table(
        "media",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("filepath_location", sa.String(500), nullable=False),
        sa.Column("file_size", sa.String(64)),
        sa.Column("user", sa.String(80), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_media_user", "media", ["user"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(40), nullable=False),
        sa.Column("description", sa.Text),
    )
    op.create_index("ix_tags_name", "tags", ["name"], unique=True)

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("asked_by", sa.String(80), nullable=False),
        sa.Column("ask_date_time", sa.DateTime, nullable=False),
        sa.Column("views", sa.JSON),
    )
    op.create_index("ix_questions_asked_by", "questions", ["asked_by"])
    op.create_index("ix_questions_ask_date_time", "questions", ["ask_date_time"])

    op.create_table(
        "question_tags",
        sa.Column("question_id", sa.Integer, sa.ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("tag_id", sa.Integer, sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "answers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("question_id", sa.Integer, sa.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("ans_by", sa.String(80), nullable=False),
        sa.Column("ans_date_time", sa.DateTime, nullable=False),
    )
    op.create_index("ix_answers_question_id", "answers", ["question_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("question_id", sa.Integer, sa.ForeignKey("questions.id", ondelete="CASCADE")),
        sa.Column("answer_id", sa.Integer, sa.ForeignKey("answers.id", ondelete="CASCADE")),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("comment_by", sa.String(80), nullable=False),
        sa.Column("comment_date_time", sa.DateTime, nullable=False),
        sa.Column("media_path", sa.String(500)),
        sa.Column("media_url", sa.String(500)),
        sa.Column("media_size", sa.String(64)),
        sa.Column("permit_download", sa.Boolean),
    )
    op.create_index("ix_comments_question_id", "comments", ["question_id"])
    op.create_index("ix_comments_answer_id", "comments", ["answer_id"])
    op.create_index("ix_comments_comment_by", "comments", ["comment_by"])


def downgrade() -> None:
    op.drop_table("comments")
    op.drop_table("answers")
    op.drop_table("question_tags")
    op.drop_table("questions")
    op.drop_table("tags")
    op.drop_table("media")
    op.drop_table("gallery_likes")
    op.drop_table("gallery_posts")
    op.drop_table("jobs")
    op.drop_table("testimonials")
    op.drop_table("users")
