from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, JSONType


class AboutContent(Base):
    """Single-row table backing the About page."""

    __tablename__ = "about_content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hero_image: Mapped[str] = mapped_column(Text, default="")
    hero_subtitle_en: Mapped[str] = mapped_column(Text, default="")
    hero_subtitle_de: Mapped[str] = mapped_column(Text, default="")
    hero_subtitle_ru: Mapped[str] = mapped_column(Text, default="")
    story_title_en: Mapped[str] = mapped_column(String(255), default="Our Story")
    story_title_de: Mapped[str] = mapped_column(String(255), default="Unsere Geschichte")
    story_title_ru: Mapped[str] = mapped_column(String(255), default="Наша история")
    story_paragraph1_en: Mapped[str] = mapped_column(Text, default="")
    story_paragraph1_de: Mapped[str] = mapped_column(Text, default="")
    story_paragraph1_ru: Mapped[str] = mapped_column(Text, default="")
    story_paragraph2_en: Mapped[str] = mapped_column(Text, default="")
    story_paragraph2_de: Mapped[str] = mapped_column(Text, default="")
    story_paragraph2_ru: Mapped[str] = mapped_column(Text, default="")
    story_images: Mapped[list] = mapped_column(JSONType, default=list)
    stats: Mapped[list] = mapped_column(JSONType, default=list)
    values: Mapped[list] = mapped_column(JSONType, default=list)
    team_title_en: Mapped[str] = mapped_column(String(255), default="Meet Our Team")
    team_title_de: Mapped[str] = mapped_column(String(255), default="Unser Team")
    team_title_ru: Mapped[str] = mapped_column(String(255), default="Наша команда")
    team_subtitle_en: Mapped[str] = mapped_column(Text, default="")
    team_subtitle_de: Mapped[str] = mapped_column(Text, default="")
    team_subtitle_ru: Mapped[str] = mapped_column(Text, default="")
    team_members: Mapped[list] = mapped_column(JSONType, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
