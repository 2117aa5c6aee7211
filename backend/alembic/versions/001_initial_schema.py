"""Initial schema: tours, catalogue, bookings, content and site tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None

LOCALES = ("en", "de", "ru")


def _localized(name: str, type_, **kwargs) -> list[sa.Column]:
    return [sa.Column(f"{name}_{locale}", type_, **kwargs) for locale in LOCALES]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "tour_categories",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("slug", sa.String(255), nullable=False, unique=True),
        sa.Column("name_en", sa.String(255), nullable=False),
        sa.Column("name_de", sa.String(255), server_default=""),
        sa.Column("name_ru", sa.String(255), server_default=""),
        *_localized("description", sa.Text, server_default=""),
        sa.Column("icon", sa.String(50), server_default="map"),
        sa.Column("display_order", sa.Integer, server_default="0"),
        sa.Column("show_in_menu", sa.Boolean, server_default=sa.true()),
        sa.Column("status", sa.String(20), server_default="active"),
        sa.Column("image", sa.Text, server_default=""),
        *_timestamps(),
    )

    op.create_table(
        "tours",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("slug", sa.String(255), nullable=False, unique=True),
        sa.Column("title_en", sa.String(255), nullable=False),
        sa.Column("title_de", sa.String(255), server_default=""),
        sa.Column("title_ru", sa.String(255), server_default=""),
        *_localized("description", sa.Text, server_default=""),
        *_localized("highlights", sa.Text, server_default=""),
        sa.Column("destination", sa.String(255), nullable=False),
        sa.Column(
            "category_id",
            sa.Integer,
            sa.ForeignKey("tour_categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("duration", sa.Integer, server_default="1"),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("main_image", sa.Text, server_default=""),
        sa.Column("gallery_images", JSONB, server_default="[]"),
        sa.Column("tour_type", sa.String(20), server_default="cultural"),
        sa.Column("status", sa.String(20), server_default="draft"),
        sa.Column("is_bestseller", sa.Boolean, server_default=sa.false()),
        sa.Column("featured", sa.Boolean, server_default=sa.false()),
        sa.Column("rating", sa.Numeric(2, 1), server_default="0"),
        sa.Column("reviews", sa.Integer, server_default="0"),
        sa.Column("saves_count", sa.Integer, server_default="0"),
        *_localized("included", JSONB, server_default="[]"),
        *_localized("not_included", JSONB, server_default="[]"),
        sa.Column("group_size", sa.String(50), server_default=""),
        *_localized("meta_title", sa.String(255), server_default=""),
        *_localized("meta_description", sa.Text, server_default=""),
        *_localized("keywords", sa.Text, server_default=""),
        *_timestamps(),
    )
    op.create_index("ix_tours_status_created", "tours", ["status", "created_at"])
    op.create_index("ix_tours_category_id", "tours", ["category_id"])

    op.create_table(
        "itineraries",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "tour_id",
            sa.Integer,
            sa.ForeignKey("tours.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day_number", sa.Integer, nullable=False),
        *_localized("title", sa.String(255), server_default=""),
        *_localized("description", sa.Text, server_default=""),
    )
    op.create_index("ix_itineraries_tour_day", "itineraries", ["tour_id", "day_number"])

    op.create_table(
        "saved_tours",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "tour_id",
            sa.Integer,
            sa.ForeignKey("tours.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("session_id", sa.String(64), nullable=False, index=True),
        sa.Column("ip_address", sa.String(64), server_default="unknown"),
        sa.Column("user_agent", sa.Text, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("tour_id", "session_id", name="uq_saved_tours_tour_session"),
    )

    op.create_table(
        "destinations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("slug", sa.String(255), unique=True, nullable=True),
        *_localized("name", sa.String(255), server_default=""),
        *_localized("description", sa.Text, server_default=""),
        sa.Column("image", sa.Text, server_default=""),
        sa.Column("country", sa.String(100), server_default=""),
        sa.Column("region", sa.String(100), server_default=""),
        sa.Column("status", sa.String(20), server_default="active"),
        sa.Column("featured", sa.Boolean, server_default=sa.false()),
        sa.Column("tours_count", sa.Integer, server_default="0"),
        *_timestamps(),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("booking_code", sa.String(20), unique=True, nullable=True),
        sa.Column(
            "tour_id",
            sa.Integer,
            sa.ForeignKey("tours.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), server_default=""),
        sa.Column("country", sa.String(100), server_default=""),
        sa.Column("adults", sa.Integer, server_default="1"),
        sa.Column("children", sa.Integer, server_default="0"),
        sa.Column("start_date", sa.Date, nullable=True),
        sa.Column("tour_date", sa.Date, nullable=True),
        sa.Column("tour_type", sa.String(20), server_default=""),
        sa.Column("special_requests", sa.Text, server_default=""),
        sa.Column("total_price", sa.Numeric(10, 2), server_default="0"),
        sa.Column("currency", sa.String(3), server_default="USD"),
        sa.Column("status", sa.String(20), server_default="pending"),
        sa.Column("payment_status", sa.String(20), server_default="unpaid"),
        *_timestamps(),
    )
    op.create_index("ix_bookings_status_created", "bookings", ["status", "created_at"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "tour_id",
            sa.Integer,
            sa.ForeignKey("tours.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("author_email", sa.String(255), server_default=""),
        sa.Column("author_country", sa.String(100), server_default=""),
        sa.Column("author_avatar", sa.Text, server_default=""),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("title", sa.String(255), server_default=""),
        sa.Column("comment", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), server_default="pending"),
        sa.Column("source", sa.String(50), server_default="website"),
        *_timestamps(),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("slug", sa.String(255), nullable=False, unique=True),
        *_localized("title", sa.String(255), server_default=""),
        *_localized("excerpt", sa.Text, server_default=""),
        *_localized("content", sa.Text, server_default=""),
        sa.Column("image", sa.Text, server_default=""),
        sa.Column("gallery", JSONB, server_default="[]"),
        sa.Column("author", sa.String(255), server_default=""),
        sa.Column("category", sa.String(100), server_default=""),
        sa.Column("tags", JSONB, server_default="[]"),
        sa.Column("status", sa.String(20), server_default="draft"),
        sa.Column("read_time", sa.Integer, server_default="0"),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_localized("meta_title", sa.String(255), server_default=""),
        *_localized("meta_description", sa.Text, server_default=""),
        *_localized("keywords", sa.Text, server_default=""),
        *_localized("og_title", sa.String(255), server_default=""),
        *_localized("og_description", sa.Text, server_default=""),
        *_timestamps(),
    )

    op.create_table(
        "menus",
        sa.Column("id", sa.Integer, primary_key=True),
        *_localized("name", sa.String(255), server_default=""),
        sa.Column("url", sa.Text, server_default=""),
        sa.Column(
            "parent_id",
            sa.Integer,
            sa.ForeignKey("menus.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("location", sa.String(20), server_default="header"),
        sa.Column("order_index", sa.Integer, server_default="0"),
        sa.Column("open_in_new_tab", sa.Boolean, server_default=sa.false()),
        sa.Column("icon", sa.String(50), server_default=""),
        sa.Column("status", sa.String(20), server_default="active"),
        *_timestamps(),
    )

    op.create_table(
        "about_content",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("hero_image", sa.Text, server_default=""),
        *_localized("hero_subtitle", sa.Text, server_default=""),
        sa.Column("story_title_en", sa.String(255), server_default="Our Story"),
        sa.Column("story_title_de", sa.String(255), server_default="Unsere Geschichte"),
        sa.Column("story_title_ru", sa.String(255), server_default="Наша история"),
        *_localized("story_paragraph1", sa.Text, server_default=""),
        *_localized("story_paragraph2", sa.Text, server_default=""),
        sa.Column("story_images", JSONB, server_default="[]"),
        sa.Column("stats", JSONB, server_default="[]"),
        sa.Column("values", JSONB, server_default="[]"),
        sa.Column("team_title_en", sa.String(255), server_default="Meet Our Team"),
        sa.Column("team_title_de", sa.String(255), server_default="Unser Team"),
        sa.Column("team_title_ru", sa.String(255), server_default="Наша команда"),
        *_localized("team_subtitle", sa.Text, server_default=""),
        sa.Column("team_members", JSONB, server_default="[]"),
        *_timestamps(),
    )

    op.create_table(
        "contact_messages",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), server_default="new"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "newsletter_subscribers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("subscribed_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("newsletter_subscribers")
    op.drop_table("contact_messages")
    op.drop_table("about_content")
    op.drop_table("menus")
    op.drop_table("blog_posts")
    op.drop_table("reviews")
    op.drop_index("ix_bookings_status_created")
    op.drop_table("bookings")
    op.drop_table("destinations")
    op.drop_table("saved_tours")
    op.drop_index("ix_itineraries_tour_day")
    op.drop_table("itineraries")
    op.drop_index("ix_tours_category_id")
    op.drop_index("ix_tours_status_created")
    op.drop_table("tours")
    op.drop_table("tour_categories")
