"""Tours router: public listing/detail plus admin CRUD, itineraries included."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.tour import Itinerary, Tour, TourCategory
from app.schemas.tour import ItineraryDay, TourCreate, TourUpdate
from app.services.localization import slugify

logger = logging.getLogger(__name__)

router = APIRouter()

_DIRECT_FIELDS = (
    "slug",
    "destination",
    "category_id",
    "duration",
    "price",
    "main_image",
    "gallery_images",
    "tour_type",
    "status",
    "is_bestseller",
    "featured",
    "group_size",
)
_NULLABLE_FIELDS = ("category_id",)
_LOCALIZED_FIELDS = (
    ("title", ""),
    ("description", ""),
    ("highlights", ""),
    ("included", []),
    ("not_included", []),
    ("meta_title", ""),
    ("meta_description", ""),
    ("keywords", ""),
)


def _itinerary_rows(tour_id: int, days: list[ItineraryDay]) -> list[Itinerary]:
    rows = []
    for i, day in enumerate(days):
        rows.append(
            Itinerary(
                tour_id=tour_id,
                day_number=day.day or i + 1,
                **day.localized("title"),
                **day.localized("description"),
            )
        )
    return rows


async def _load_itineraries(db: AsyncSession, tour_id: int) -> list[dict]:
    result = await db.execute(
        select(Itinerary).where(Itinerary.tour_id == tour_id).order_by(Itinerary.day_number)
    )
    return [row.to_dict() for row in result.scalars().all()]


async def _get_tour_or_404(db: AsyncSession, tour_id: int) -> Tour:
    tour = await db.get(Tour, tour_id)
    if not tour:
        raise HTTPException(status_code=404, detail="Tour not found")
    return tour


@router.get("")
async def list_tours(
    status: str | None = Query(None),
    destination: str | None = Query(None),
    type: str | None = Query(None),
    category: str | None = Query(None),
    slug: str | None = Query(None),
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List tours, newest first."""
    query = select(Tour).order_by(Tour.created_at.desc(), Tour.id.desc())

    if status:
        query = query.where(Tour.status == status)
    if destination:
        query = query.where(func.lower(Tour.destination) == destination.lower())
    if type:
        query = query.where(Tour.tour_type == type)
    if slug:
        query = query.where(Tour.slug == slug)
    if category:
        query = query.join(TourCategory, Tour.category_id == TourCategory.id).where(
            TourCategory.slug == category
        )
    if limit:
        query = query.limit(limit)

    result = await db.execute(query)
    return [tour.to_dict() for tour in result.scalars().all()]


@router.post("", status_code=201)
async def create_tour(req: TourCreate, db: AsyncSession = Depends(get_db)):
    """Create a tour; the slug is derived from the English title unless supplied."""
    title = req.localized("title")

    tour = Tour(
        slug=req.slug or slugify(title["title_en"]),
        **title,
        **req.localized("description"),
        **req.localized("highlights"),
        **req.localized("included", default=[]),
        **req.localized("not_included", default=[]),
        **req.localized("meta_title"),
        **req.localized("meta_description"),
        **req.localized("keywords"),
        destination=req.destination,
        category_id=req.category_id,
        duration=req.duration or 1,
        price=req.price,
        main_image=req.main_image or "",
        gallery_images=req.gallery_images or [],
        tour_type=req.tour_type or "cultural",
        status=req.status or "draft",
        is_bestseller=bool(req.is_bestseller),
        featured=bool(req.featured),
        group_size=req.group_size or "",
        rating=0,
        reviews=0,
    )
    db.add(tour)
    await db.flush()

    if req.itinerary:
        db.add_all(_itinerary_rows(tour.id, req.itinerary))

    await db.commit()
    await db.refresh(tour)
    logger.info(f"Tour created: {tour.id} ({tour.slug})")

    return {**tour.to_dict(), "itineraries": await _load_itineraries(db, tour.id)}


@router.get("/{tour_ref}")
async def get_tour(tour_ref: str, db: AsyncSession = Depends(get_db)):
    """Get a tour by numeric id or by slug, with its itinerary."""
    if tour_ref.isdecimal():
        tour = await db.get(Tour, int(tour_ref))
    else:
        result = await db.execute(select(Tour).where(Tour.slug == tour_ref))
        tour = result.scalar_one_or_none()

    if not tour:
        raise HTTPException(status_code=404, detail="Tour not found")

    return {**tour.to_dict(), "itineraries": await _load_itineraries(db, tour.id)}


@router.put("/{tour_id}")
async def update_tour(tour_id: int, req: TourUpdate, db: AsyncSession = Depends(get_db)):
    """Update supplied fields; a non-empty itinerary replaces the stored one."""
    tour = await _get_tour_or_404(db, tour_id)

    supplied = req.model_dump(exclude_unset=True)
    for field in _DIRECT_FIELDS:
        if field not in supplied:
            continue
        # an explicit null only clears nullable columns
        if supplied[field] is None and field not in _NULLABLE_FIELDS:
            continue
        setattr(tour, field, supplied[field])

    for field, default in _LOCALIZED_FIELDS:
        if req.has_localized(field):
            for column, value in req.localized(field, default=default).items():
                setattr(tour, column, value)

    await db.commit()

    if req.itinerary:
        # Replace: delete-then-insert, two separate commits
        await db.execute(delete(Itinerary).where(Itinerary.tour_id == tour_id))
        await db.commit()
        db.add_all(_itinerary_rows(tour_id, req.itinerary))
        await db.commit()

    await db.refresh(tour)
    return {**tour.to_dict(), "itineraries": await _load_itineraries(db, tour_id)}


@router.delete("/{tour_id}")
async def delete_tour(tour_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a tour and its itinerary rows."""
    tour = await _get_tour_or_404(db, tour_id)

    await db.execute(delete(Itinerary).where(Itinerary.tour_id == tour_id))
    await db.delete(tour)
    await db.commit()
    logger.info(f"Tour deleted: {tour_id}")

    return {"message": "Tour deleted successfully"}
