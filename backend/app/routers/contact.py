"""Contact form router."""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.contact import ContactMessage

logger = logging.getLogger(__name__)

router = APIRouter()


class ContactRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


@router.post("")
async def send_message(req: ContactRequest, db: AsyncSession = Depends(get_db)):
    message = ContactMessage(
        name=req.name,
        email=req.email,
        subject=req.subject,
        message=req.message,
        status="new",
    )
    db.add(message)
    await db.commit()
    logger.info(f"Contact form submission from {req.email}: {req.subject!r}")

    return {"message": "Message sent successfully"}


@router.get("")
async def list_messages(db: AsyncSession = Depends(get_db)):
    """Admin inbox, newest first."""
    result = await db.execute(
        select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
    )
    return [m.to_dict() for m in result.scalars().all()]
