"""Reviews router: visitor reviews, moderated from the admin."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.review import Review

router = APIRouter()


class ReviewCreate(BaseModel):
    tour_id: int | None = None
    author_name: str = Field(min_length=1)
    author_email: str = ""
    author_country: str = ""
    author_avatar: str = ""
    rating: int = Field(ge=1, le=5)
    title: str = ""
    comment: str = Field(min_length=1)
    status: str = "pending"
    source: str = "website"


class ReviewUpdate(BaseModel):
    tour_id: int | None = None
    author_name: str | None = None
    author_email: str | None = None
    author_country: str | None = None
    author_avatar: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    title: str | None = None
    comment: str | None = None
    status: str | None = None
    source: str | None = None


def _serialize(review: Review) -> dict:
    tour = review.tour
    return {
        **review.to_dict(),
        "tour": {"id": tour.id, "slug": tour.slug, "title_en": tour.title_en} if tour else None,
    }


async def _get_review_or_404(db: AsyncSession, review_id: int) -> Review:
    result = await db.execute(
        select(Review).where(Review.id == review_id).options(selectinload(Review.tour))
    )
    review = result.scalar_one_or_none()
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.get("")
async def list_reviews(
    status: str | None = Query(None),
    tour_id: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    query = (
        select(Review)
        .options(selectinload(Review.tour))
        .order_by(Review.created_at.desc(), Review.id.desc())
    )
    if status:
        query = query.where(Review.status == status)
    if tour_id is not None:
        query = query.where(Review.tour_id == tour_id)

    result = await db.execute(query)
    return [_serialize(r) for r in result.scalars().all()]


@router.post("", status_code=201)
async def create_review(req: ReviewCreate, db: AsyncSession = Depends(get_db)):
    review = Review(**req.model_dump())
    db.add(review)
    await db.commit()

    review_id = review.id
    db.expire(review)
    return _serialize(await _get_review_or_404(db, review_id))


@router.get("/{review_id}")
async def get_review(review_id: int, db: AsyncSession = Depends(get_db)):
    return _serialize(await _get_review_or_404(db, review_id))


@router.put("/{review_id}")
async def update_review(
    review_id: int,
    req: ReviewUpdate,
    db: AsyncSession = Depends(get_db),
):
    review = await _get_review_or_404(db, review_id)

    for field, value in req.model_dump(exclude_unset=True).items():
        # an explicit null tour_id unlinks the review; other columns keep their value
        if value is None and field != "tour_id":
            continue
        if not value and field in ("author_name", "comment", "status", "source"):
            continue
        setattr(review, field, value)

    await db.commit()
    db.expire(review)
    return _serialize(await _get_review_or_404(db, review_id))


@router.delete("/{review_id}")
async def delete_review(review_id: int, db: AsyncSession = Depends(get_db)):
    review = await _get_review_or_404(db, review_id)
    await db.delete(review)
    await db.commit()
    return {"message": "Review deleted successfully"}
