"""Saved tours router: anonymous wishlists keyed by a session cookie."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.config import settings
from app.database import get_db
from app.models.tour import SavedTour, Tour

logger = logging.getLogger(__name__)

router = APIRouter()


class SaveTourRequest(BaseModel):
    tour_id: int | None = None


def _session_id(request: Request) -> str:
    return request.cookies.get(settings.session_cookie_name) or str(uuid.uuid4())


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("x-real-ip") or (request.client.host if request.client else "unknown")


def _tour_card(tour: Tour | None) -> dict | None:
    if tour is None:
        return None
    return {
        "id": tour.id,
        "slug": tour.slug,
        "title_en": tour.title_en,
        "title_de": tour.title_de,
        "title_ru": tour.title_ru,
        "main_image": tour.main_image,
        "destination": tour.destination,
        "price": float(tour.price) if tour.price is not None else None,
        "duration": tour.duration,
    }


@router.get("")
async def get_saved_tours(
    request: Request,
    stats: str | None = Query(None),
    tour_id: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Admin stats (stats=true), a saved flag (tour_id=…), or the session's saved tours."""
    if stats == "true":
        result = await db.execute(
            select(SavedTour)
            .options(selectinload(SavedTour.tour))
            .order_by(SavedTour.created_at.desc(), SavedTour.id.desc())
        )
        saves = result.scalars().all()

        per_tour: dict[int, dict] = {}
        for save in saves:
            entry = per_tour.setdefault(
                save.tour_id, {"tour": _tour_card(save.tour), "count": 0, "saves": []}
            )
            entry["count"] += 1
            entry["saves"].append(
                {
                    "id": save.id,
                    "session_id": save.session_id,
                    "ip_address": save.ip_address,
                    "created_at": save.created_at.isoformat() if save.created_at else None,
                }
            )

        return {
            "total_saves": len(saves),
            "tours": sorted(per_tour.values(), key=lambda e: e["count"], reverse=True),
        }

    session_id = _session_id(request)

    if tour_id is not None:
        existing = await db.scalar(
            select(SavedTour.id).where(
                SavedTour.tour_id == tour_id, SavedTour.session_id == session_id
            )
        )
        return {"isSaved": existing is not None}

    result = await db.execute(
        select(SavedTour)
        .where(SavedTour.session_id == session_id)
        .options(selectinload(SavedTour.tour))
        .order_by(SavedTour.created_at.desc(), SavedTour.id.desc())
    )
    return [
        {
            "id": save.id,
            "tour_id": save.tour_id,
            "created_at": save.created_at.isoformat() if save.created_at else None,
            "tour": _tour_card(save.tour),
        }
        for save in result.scalars().all()
    ]


@router.post("")
async def save_tour(
    req: SaveTourRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    if not req.tour_id:
        raise HTTPException(status_code=400, detail="tour_id is required")

    if not await db.get(Tour, req.tour_id):
        raise HTTPException(status_code=404, detail="Tour not found")

    session_id = _session_id(request)

    existing = await db.scalar(
        select(SavedTour.id).where(
            SavedTour.tour_id == req.tour_id, SavedTour.session_id == session_id
        )
    )
    if existing is not None:
        return {"message": "Already saved", "id": existing}

    save = SavedTour(
        tour_id=req.tour_id,
        session_id=session_id,
        ip_address=_client_ip(request),
        user_agent=request.headers.get("user-agent", ""),
    )
    db.add(save)
    await db.execute(
        update(Tour).where(Tour.id == req.tour_id).values(saves_count=Tour.saves_count + 1)
    )
    await db.commit()
    await db.refresh(save)
    logger.info(f"Tour {req.tour_id} saved by session {session_id[:8]}")

    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return save.to_dict()


@router.delete("")
async def unsave_tour(
    request: Request,
    tour_id: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    if not tour_id:
        raise HTTPException(status_code=400, detail="tour_id is required")

    session_id = _session_id(request)

    result = await db.execute(
        delete(SavedTour).where(SavedTour.tour_id == tour_id, SavedTour.session_id == session_id)
    )
    if result.rowcount:
        await db.execute(
            update(Tour)
            .where(Tour.id == tour_id, Tour.saves_count > 0)
            .values(saves_count=Tour.saves_count - 1)
        )
    await db.commit()

    return {"success": True}
