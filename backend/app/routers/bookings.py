"""Bookings router: public booking form plus admin management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.booking import Booking
from app.models.tour import Tour
from app.schemas.booking import (
    BOOKING_STATUSES,
    BookingCreate,
    BookingStatusUpdate,
    BookingUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _tour_summary(tour: Tour | None) -> dict | None:
    if tour is None:
        return None
    return {
        "id": tour.id,
        "slug": tour.slug,
        "title_en": tour.title_en,
        "title_de": tour.title_de,
        "title_ru": tour.title_ru,
    }


def _serialize(booking: Booking) -> dict:
    return {**booking.to_dict(), "tour": _tour_summary(booking.tour)}


def _check_status(status: str | None):
    if status is not None and status not in BOOKING_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid status. Must be one of: {', '.join(BOOKING_STATUSES)}",
        )


async def _get_booking_or_404(db: AsyncSession, booking_id: int) -> Booking:
    result = await db.execute(
        select(Booking).where(Booking.id == booking_id).options(selectinload(Booking.tour))
    )
    booking = result.scalar_one_or_none()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.get("")
async def list_bookings(
    status: str | None = Query(None),
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List bookings, newest first. status=all disables the filter."""
    query = (
        select(Booking)
        .options(selectinload(Booking.tour))
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    if status and status != "all":
        query = query.where(Booking.status == status)
    if limit:
        query = query.limit(limit)

    result = await db.execute(query)
    return [_serialize(b) for b in result.scalars().all()]


@router.post("", status_code=201)
async def create_booking(req: BookingCreate, db: AsyncSession = Depends(get_db)):
    """Create a pending booking and assign its BKnnn code."""
    if req.tour_id is not None and not await db.get(Tour, req.tour_id):
        raise HTTPException(status_code=400, detail="Unknown tour_id")

    booking = Booking(
        tour_id=req.tour_id,
        first_name=req.first_name,
        last_name=req.last_name,
        email=req.email,
        phone=req.phone,
        country=req.country,
        adults=req.adults,
        children=req.children,
        start_date=req.start_date,
        tour_date=req.start_date,
        tour_type=req.tour_type,
        special_requests=req.special_requests,
        total_price=req.total_price,
        currency=req.currency,
        status="pending",
    )
    db.add(booking)
    await db.flush()
    booking.booking_code = f"BK{booking.id:03d}"
    await db.commit()

    logger.info(f"Booking {booking.booking_code} created for tour {booking.tour_id}")
    booking_id = booking.id
    db.expire(booking)
    return _serialize(await _get_booking_or_404(db, booking_id))


@router.get("/{booking_id}")
async def get_booking(booking_id: int, db: AsyncSession = Depends(get_db)):
    return _serialize(await _get_booking_or_404(db, booking_id))


@router.put("/{booking_id}")
async def update_booking(
    booking_id: int,
    req: BookingUpdate,
    db: AsyncSession = Depends(get_db),
):
    booking = await _get_booking_or_404(db, booking_id)
    _check_status(req.status)

    update_data = req.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # empty strings never blank out the name/email/status columns
        if value is None or (value == "" and field in ("first_name", "last_name", "email", "status")):
            continue
        setattr(booking, field, value)

    await db.commit()
    db.expire(booking)
    return _serialize(await _get_booking_or_404(db, booking_id))


@router.patch("/{booking_id}/status")
async def update_booking_status(
    booking_id: int,
    req: BookingStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    booking = await _get_booking_or_404(db, booking_id)
    _check_status(req.status)

    booking.status = req.status
    await db.commit()
    logger.info(f"Booking {booking.booking_code} -> {req.status}")

    db.expire(booking)
    return _serialize(await _get_booking_or_404(db, booking_id))


@router.delete("/{booking_id}")
async def delete_booking(booking_id: int, db: AsyncSession = Depends(get_db)):
    booking = await _get_booking_or_404(db, booking_id)
    await db.delete(booking)
    await db.commit()
    return {"message": "Booking deleted successfully"}
