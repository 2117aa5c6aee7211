"""Menus router: navigation entries, served as a parent/children tree."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.menu import MenuItem
from app.services.menu_tree import build_menu_tree

logger = logging.getLogger(__name__)

router = APIRouter()


class MenuItemCreate(BaseModel):
    name_en: str = ""
    name_de: str = ""
    name_ru: str = ""
    url: str = ""
    parent_id: int | None = None
    location: str = "header"
    order_index: int = 0
    open_in_new_tab: bool = False
    icon: str = ""
    status: str = "active"


class MenuItemUpdate(BaseModel):
    name_en: str | None = None
    name_de: str | None = None
    name_ru: str | None = None
    url: str | None = None
    parent_id: int | None = None
    location: str | None = None
    order_index: int | None = None
    open_in_new_tab: bool | None = None
    icon: str | None = None
    status: str | None = None


async def _get_item_or_404(db: AsyncSession, item_id: int) -> MenuItem:
    item = await db.get(MenuItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


async def _check_parent(db: AsyncSession, parent_id: int | None, item_id: int | None = None):
    if parent_id is None:
        return
    if parent_id == item_id:
        raise HTTPException(status_code=400, detail="A menu item cannot be its own parent")
    if not await db.get(MenuItem, parent_id):
        raise HTTPException(status_code=400, detail="Parent menu item not found")


@router.get("")
async def list_menus(
    location: str | None = Query(None),
    status: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Menu tree for a location, ordered by order_index at every level."""
    query = select(MenuItem).order_by(MenuItem.order_index.asc())
    if location:
        query = query.where(MenuItem.location == location)
    if status:
        query = query.where(MenuItem.status == status)

    result = await db.execute(query)
    return build_menu_tree([item.to_dict() for item in result.scalars().all()])


@router.post("", status_code=201)
async def create_menu_item(req: MenuItemCreate, db: AsyncSession = Depends(get_db)):
    # 0 is treated as "no parent", like an empty select in the admin form
    parent_id = req.parent_id or None
    await _check_parent(db, parent_id)

    item = MenuItem(**req.model_dump(exclude={"parent_id"}), parent_id=parent_id)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item.to_dict()


@router.get("/{item_id}")
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    return (await _get_item_or_404(db, item_id)).to_dict()


@router.put("/{item_id}")
async def update_menu_item(
    item_id: int,
    req: MenuItemUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update only the keys present in the body; parent_id may be set to null."""
    item = await _get_item_or_404(db, item_id)

    update_data = req.model_dump(exclude_unset=True)
    if "parent_id" in update_data:
        update_data["parent_id"] = update_data["parent_id"] or None
        await _check_parent(db, update_data["parent_id"], item_id)

    for field, value in update_data.items():
        if value is None and field != "parent_id":
            continue
        setattr(item, field, value)

    await db.commit()
    await db.refresh(item)
    return item.to_dict()


@router.delete("/{item_id}")
async def delete_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    """Delete the item's direct children, then the item."""
    item = await _get_item_or_404(db, item_id)

    await db.execute(delete(MenuItem).where(MenuItem.parent_id == item_id))
    await db.delete(item)
    await db.commit()
    logger.info(f"Menu item {item_id} deleted")

    return {"message": "Menu item deleted successfully"}
