"""Seed the default tour categories."""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError

from app.database import async_session_factory, is_missing_table
from app.models.tour import TourCategory

logger = logging.getLogger(__name__)

# (slug, icon, en, de, ru)
DEFAULT_CATEGORIES = [
    ("homestays-hiking", "home", "Homestays & Hiking", "Gastfamilien & Wandern", "Гостевые дома и походы"),
    ("trekking", "mountain", "Trekking", "Trekking", "Треккинг"),
    ("horse-riding", "accessibility", "Horse Riding", "Reiten", "Конные туры"),
    ("adventure-tours", "compass", "Adventure Tours", "Abenteuerreisen", "Приключенческие туры"),
    ("cultural-tours", "landmark", "Cultural Tours", "Kulturreisen", "Культурные туры"),
    ("day-trips", "sun", "Day Trips", "Tagesausflüge", "Однодневные туры"),
]


async def seed_categories(session_factory=async_session_factory) -> int:
    """Insert any default category whose slug is not taken yet. Returns the number added."""
    async with session_factory() as db:
        try:
            result = await db.execute(select(TourCategory.slug))
        except DBAPIError as e:
            if not is_missing_table(e):
                raise
            logger.warning("tour_categories table missing; run the migrations before seeding")
            return 0
        existing = set(result.scalars().all())

        added = 0
        for order, (slug, icon, name_en, name_de, name_ru) in enumerate(DEFAULT_CATEGORIES, start=1):
            if slug in existing:
                continue
            db.add(
                TourCategory(
                    slug=slug,
                    icon=icon,
                    name_en=name_en,
                    name_de=name_de,
                    name_ru=name_ru,
                    display_order=order,
                    show_in_menu=True,
                    status="active",
                )
            )
            added += 1

        if added:
            await db.commit()
            logger.info(f"Seeded {added} tour categories")
        return added


async def seed(session_factory=async_session_factory):
    await seed_categories(session_factory)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
