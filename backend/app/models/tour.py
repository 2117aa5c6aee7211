from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, JSONType


class TourCategory(Base):
    __tablename__ = "tour_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_de: Mapped[str] = mapped_column(String(255), default="")
    name_ru: Mapped[str] = mapped_column(String(255), default="")
    description_en: Mapped[str] = mapped_column(Text, default="")
    description_de: Mapped[str] = mapped_column(Text, default="")
    description_ru: Mapped[str] = mapped_column(Text, default="")
    icon: Mapped[str] = mapped_column(String(50), default="map")
    display_order: Mapped[int] = mapped_column(Integer, default=0)
    show_in_menu: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(20), default="active")
    image: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Tour(Base):
    __tablename__ = "tours"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_de: Mapped[str] = mapped_column(String(255), default="")
    title_ru: Mapped[str] = mapped_column(String(255), default="")
    description_en: Mapped[str] = mapped_column(Text, default="")
    description_de: Mapped[str] = mapped_column(Text, default="")
    description_ru: Mapped[str] = mapped_column(Text, default="")
    highlights_en: Mapped[str] = mapped_column(Text, default="")
    highlights_de: Mapped[str] = mapped_column(Text, default="")
    highlights_ru: Mapped[str] = mapped_column(Text, default="")
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tour_categories.id", ondelete="SET NULL")
    )
    duration: Mapped[int] = mapped_column(Integer, default=1)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    main_image: Mapped[str] = mapped_column(Text, default="")
    gallery_images: Mapped[list] = mapped_column(JSONType, default=list)
    tour_type: Mapped[str] = mapped_column(String(20), default="cultural")
    status: Mapped[str] = mapped_column(String(20), default="draft")
    is_bestseller: Mapped[bool] = mapped_column(Boolean, default=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False)
    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), default=0)
    reviews: Mapped[int] = mapped_column(Integer, default=0)
    saves_count: Mapped[int] = mapped_column(Integer, default=0)
    included_en: Mapped[list] = mapped_column(JSONType, default=list)
    included_de: Mapped[list] = mapped_column(JSONType, default=list)
    included_ru: Mapped[list] = mapped_column(JSONType, default=list)
    not_included_en: Mapped[list] = mapped_column(JSONType, default=list)
    not_included_de: Mapped[list] = mapped_column(JSONType, default=list)
    not_included_ru: Mapped[list] = mapped_column(JSONType, default=list)
    group_size: Mapped[str] = mapped_column(String(50), default="")
    meta_title_en: Mapped[str] = mapped_column(String(255), default="")
    meta_title_de: Mapped[str] = mapped_column(String(255), default="")
    meta_title_ru: Mapped[str] = mapped_column(String(255), default="")
    meta_description_en: Mapped[str] = mapped_column(Text, default="")
    meta_description_de: Mapped[str] = mapped_column(Text, default="")
    meta_description_ru: Mapped[str] = mapped_column(Text, default="")
    keywords_en: Mapped[str] = mapped_column(Text, default="")
    keywords_de: Mapped[str] = mapped_column(Text, default="")
    keywords_ru: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Itinerary(Base):
    __tablename__ = "itineraries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tour_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False
    )
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    title_en: Mapped[str] = mapped_column(String(255), default="")
    title_de: Mapped[str] = mapped_column(String(255), default="")
    title_ru: Mapped[str] = mapped_column(String(255), default="")
    description_en: Mapped[str] = mapped_column(Text, default="")
    description_de: Mapped[str] = mapped_column(Text, default="")
    description_ru: Mapped[str] = mapped_column(Text, default="")


class SavedTour(Base):
    __tablename__ = "saved_tours"
    __table_args__ = (UniqueConstraint("tour_id", "session_id", name="uq_saved_tours_tour_session"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tour_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False
    )
    session_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    ip_address: Mapped[str] = mapped_column(String(64), default="unknown")
    user_agent: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    tour: Mapped["Tour"] = relationship()
