from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, JSONType


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    title_en: Mapped[str] = mapped_column(String(255), default="")
    title_de: Mapped[str] = mapped_column(String(255), default="")
    title_ru: Mapped[str] = mapped_column(String(255), default="")
    excerpt_en: Mapped[str] = mapped_column(Text, default="")
    excerpt_de: Mapped[str] = mapped_column(Text, default="")
    excerpt_ru: Mapped[str] = mapped_column(Text, default="")
    content_en: Mapped[str] = mapped_column(Text, default="")
    content_de: Mapped[str] = mapped_column(Text, default="")
    content_ru: Mapped[str] = mapped_column(Text, default="")
    image: Mapped[str] = mapped_column(Text, default="")
    gallery: Mapped[list] = mapped_column(JSONType, default=list)
    author: Mapped[str] = mapped_column(String(255), default="")
    category: Mapped[str] = mapped_column(String(100), default="")
    tags: Mapped[list] = mapped_column(JSONType, default=list)
    status: Mapped[str] = mapped_column(String(20), default="draft")
    read_time: Mapped[int] = mapped_column(Integer, default=0)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    # SEO
    meta_title_en: Mapped[str] = mapped_column(String(255), default="")
    meta_title_de: Mapped[str] = mapped_column(String(255), default="")
    meta_title_ru: Mapped[str] = mapped_column(String(255), default="")
    meta_description_en: Mapped[str] = mapped_column(Text, default="")
    meta_description_de: Mapped[str] = mapped_column(Text, default="")
    meta_description_ru: Mapped[str] = mapped_column(Text, default="")
    keywords_en: Mapped[str] = mapped_column(Text, default="")
    keywords_de: Mapped[str] = mapped_column(Text, default="")
    keywords_ru: Mapped[str] = mapped_column(Text, default="")
    og_title_en: Mapped[str] = mapped_column(String(255), default="")
    og_title_de: Mapped[str] = mapped_column(String(255), default="")
    og_title_ru: Mapped[str] = mapped_column(String(255), default="")
    og_description_en: Mapped[str] = mapped_column(Text, default="")
    og_description_de: Mapped[str] = mapped_column(Text, default="")
    og_description_ru: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
