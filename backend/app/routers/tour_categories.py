"""Tour category router: admin CRUD for the category menu."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from sqlalchemy import func, select, update
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db, is_missing_table
from app.models.tour import Tour, TourCategory
from app.schemas.common import LocalizedText

logger = logging.getLogger(__name__)

router = APIRouter()


class CategoryFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slug: str | None = None
    name: LocalizedText | None = None
    description: LocalizedText | None = None
    icon: str | None = None
    display_order: int | None = Field(
        None, validation_alias=AliasChoices("displayOrder", "display_order")
    )
    show_in_menu: bool | None = Field(
        None, validation_alias=AliasChoices("showInMenu", "show_in_menu")
    )
    status: str | None = None
    image: str | None = None


class CategoryCreate(CategoryFields):
    @model_validator(mode="after")
    def _check_required(self):
        if not self.slug or not self.name or not self.name.en:
            raise ValueError("Missing required fields: name.en, slug")
        return self


def _localized(field: str, value: LocalizedText | None) -> dict:
    value = value or LocalizedText()
    return {f"{field}_en": value.en, f"{field}_de": value.de, f"{field}_ru": value.ru}


async def _get_category_or_404(db: AsyncSession, category_id: int) -> TourCategory:
    category = await db.get(TourCategory, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("")
async def list_categories(
    status: str | None = Query(None),
    slug: str | None = Query(None),
    show_in_menu: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    query = select(TourCategory).order_by(TourCategory.display_order.asc())
    if slug:
        query = query.where(TourCategory.slug == slug)
    if status:
        query = query.where(TourCategory.status == status)
    if show_in_menu == "true":
        query = query.where(TourCategory.show_in_menu == True)

    try:
        result = await db.execute(query)
    except DBAPIError as e:
        if not is_missing_table(e):
            raise
        await db.rollback()
        logger.warning("tour_categories table missing, returning no categories")
        return []

    return [c.to_dict() for c in result.scalars().all()]


@router.post("", status_code=201)
async def create_category(req: CategoryCreate, db: AsyncSession = Depends(get_db)):
    category = TourCategory(
        slug=req.slug,
        **_localized("name", req.name),
        **_localized("description", req.description),
        icon=req.icon or "map",
        display_order=req.display_order or 0,
        show_in_menu=True if req.show_in_menu is None else req.show_in_menu,
        status=req.status or "active",
        image=req.image or "",
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)
    return category.to_dict()


@router.get("/{category_id}")
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Get a category with the number of tours linked to it."""
    category = await _get_category_or_404(db, category_id)

    tours_count = await db.scalar(
        select(func.count()).select_from(Tour).where(Tour.category_id == category_id)
    )
    return {**category.to_dict(), "tours_count": tours_count or 0}


@router.put("/{category_id}")
async def update_category(
    category_id: int,
    req: CategoryFields,
    db: AsyncSession = Depends(get_db),
):
    category = await _get_category_or_404(db, category_id)

    if req.slug:
        category.slug = req.slug
    if req.name is not None:
        for column, value in _localized("name", req.name).items():
            setattr(category, column, value)
    if req.description is not None:
        for column, value in _localized("description", req.description).items():
            setattr(category, column, value)

    for field in ("icon", "display_order", "show_in_menu", "image"):
        value = getattr(req, field)
        if value is not None:
            setattr(category, field, value)
    if req.status:
        category.status = req.status

    await db.commit()
    await db.refresh(category)
    return category.to_dict()


@router.delete("/{category_id}")
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Unlink every tour from the category, then delete it."""
    category = await _get_category_or_404(db, category_id)

    await db.execute(
        update(Tour).where(Tour.category_id == category_id).values(category_id=None)
    )
    await db.delete(category)
    await db.commit()
    logger.info(f"Category {category_id} deleted")

    return {"message": "Category deleted successfully"}
