"""Destinations router: regions/countries that tours are grouped under."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.destination import Destination
from app.schemas.common import LocalizedPayload, LocalizedText

router = APIRouter()


class DestinationPayload(LocalizedPayload):
    slug: str | None = None
    name: LocalizedText | None = None
    description: LocalizedText | None = None
    image: str | None = None
    country: str | None = None
    region: str | None = None
    status: str | None = None
    featured: bool | None = None


async def _get_destination_or_404(db: AsyncSession, destination_id: int) -> Destination:
    destination = await db.get(Destination, destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination


@router.get("")
async def list_destinations(
    status: str | None = Query(None),
    country: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    query = select(Destination).order_by(Destination.name_en.asc())
    if status:
        query = query.where(Destination.status == status)
    if country:
        query = query.where(Destination.country == country)

    result = await db.execute(query)
    return [d.to_dict() for d in result.scalars().all()]


@router.post("", status_code=201)
async def create_destination(req: DestinationPayload, db: AsyncSession = Depends(get_db)):
    destination = Destination(
        slug=req.slug,
        **req.localized("name"),
        **req.localized("description"),
        image=req.image or "",
        country=req.country or "",
        region=req.region or "",
        status=req.status or "active",
        featured=bool(req.featured),
        tours_count=0,
    )
    db.add(destination)
    await db.commit()
    await db.refresh(destination)
    return destination.to_dict()


@router.get("/{destination_id}")
async def get_destination(destination_id: int, db: AsyncSession = Depends(get_db)):
    destination = await _get_destination_or_404(db, destination_id)
    return destination.to_dict()


@router.put("/{destination_id}")
async def update_destination(
    destination_id: int,
    req: DestinationPayload,
    db: AsyncSession = Depends(get_db),
):
    """Update only the supplied fields."""
    destination = await _get_destination_or_404(db, destination_id)

    for field in ("name", "description"):
        if req.has_localized(field):
            for column, value in req.localized(field).items():
                setattr(destination, column, value)

    update_data = req.model_dump(exclude_unset=True, exclude={"name", "description"})
    for field in ("slug", "image", "country", "region", "status", "featured"):
        if update_data.get(field) is not None:
            setattr(destination, field, update_data[field])

    await db.commit()
    await db.refresh(destination)
    return destination.to_dict()


@router.delete("/{destination_id}")
async def delete_destination(destination_id: int, db: AsyncSession = Depends(get_db)):
    destination = await _get_destination_or_404(db, destination_id)
    await db.delete(destination)
    await db.commit()
    return {"message": "Destination deleted successfully"}
