"""Blog router: posts with per-language body and SEO columns."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.blog import BlogPost
from app.schemas.blog import BlogPostPayload
from app.services.localization import slugify

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_post_or_404(db: AsyncSession, post_id: int) -> BlogPost:
    post = await db.get(BlogPost, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def _publish_stamp(post: BlogPost):
    if post.status == "published" and post.published_at is None:
        post.published_at = datetime.now(timezone.utc)


@router.get("")
async def list_posts(
    status: str | None = Query(None),
    category: str | None = Query(None),
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    query = select(BlogPost).order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    if status:
        query = query.where(BlogPost.status == status)
    if category:
        query = query.where(BlogPost.category == category)
    if limit:
        query = query.limit(limit)

    result = await db.execute(query)
    return [p.to_dict() for p in result.scalars().all()]


@router.post("", status_code=201)
async def create_post(req: BlogPostPayload, db: AsyncSession = Depends(get_db)):
    columns = req.columns()
    slug = req.slug or slugify(columns["title_en"])
    if not slug:
        raise HTTPException(status_code=400, detail="Missing required field: slug")

    post = BlogPost(slug=slug, **columns)
    _publish_stamp(post)
    db.add(post)
    await db.commit()
    await db.refresh(post)
    logger.info(f"Blog post created: {post.id} ({post.slug})")
    return post.to_dict()


@router.get("/slug/{slug}")
async def get_post_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(BlogPost).where(BlogPost.slug == slug))
    post = result.scalar_one_or_none()
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post.to_dict()


@router.get("/{post_id}")
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    return (await _get_post_or_404(db, post_id)).to_dict()


@router.put("/{post_id}")
async def update_post(
    post_id: int,
    req: BlogPostPayload,
    db: AsyncSession = Depends(get_db),
):
    """Replace every editable column; omitted ones fall back to their defaults."""
    post = await _get_post_or_404(db, post_id)

    if req.slug:
        post.slug = req.slug
    for column, value in req.columns().items():
        setattr(post, column, value)
    _publish_stamp(post)

    await db.commit()
    await db.refresh(post)
    return post.to_dict()


@router.delete("/{post_id}")
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await _get_post_or_404(db, post_id)
    await db.delete(post)
    await db.commit()
    return {"success": True}
