"""About page router: one editable row, with built-in defaults until it exists."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.about import AboutContent

router = APIRouter()


class AboutPayload(BaseModel):
    hero_image: str = ""
    hero_subtitle_en: str = ""
    hero_subtitle_de: str = ""
    hero_subtitle_ru: str = ""
    story_title_en: str = "Our Story"
    story_title_de: str = "Unsere Geschichte"
    story_title_ru: str = "Наша история"
    story_paragraph1_en: str = ""
    story_paragraph1_de: str = ""
    story_paragraph1_ru: str = ""
    story_paragraph2_en: str = ""
    story_paragraph2_de: str = ""
    story_paragraph2_ru: str = ""
    story_images: list = []
    stats: list = []
    values: list = []
    team_title_en: str = "Meet Our Team"
    team_title_de: str = "Unser Team"
    team_title_ru: str = "Наша команда"
    team_subtitle_en: str = ""
    team_subtitle_de: str = ""
    team_subtitle_ru: str = ""
    team_members: list = []

    def columns(self) -> dict:
        """Column values; blank titles fall back to the defaults."""
        defaults = AboutPayload.model_fields
        data = self.model_dump()
        for field, value in data.items():
            if not value:
                default = defaults[field].default
                data[field] = list(default) if isinstance(default, list) else default
        return data


async def _current(db: AsyncSession) -> AboutContent | None:
    result = await db.execute(select(AboutContent).order_by(AboutContent.id).limit(1))
    return result.scalar_one_or_none()


@router.get("")
async def get_about(db: AsyncSession = Depends(get_db)):
    about = await _current(db)
    if about is None:
        return AboutPayload().columns()
    return about.to_dict()


@router.put("")
async def update_about(req: AboutPayload, db: AsyncSession = Depends(get_db)):
    """Update the row, creating it on first save."""
    about = await _current(db)
    if about is None:
        about = AboutContent(**req.columns())
        db.add(about)
    else:
        for column, value in req.columns().items():
            setattr(about, column, value)

    await db.commit()
    await db.refresh(about)
    return about.to_dict()
