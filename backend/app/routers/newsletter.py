"""Newsletter subscription router."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.contact import NewsletterSubscriber

logger = logging.getLogger(__name__)

router = APIRouter()


class SubscribeRequest(BaseModel):
    email: EmailStr


@router.post("")
async def subscribe(req: SubscribeRequest, db: AsyncSession = Depends(get_db)):
    email = req.email.lower()

    existing = await db.scalar(
        select(NewsletterSubscriber.id).where(func.lower(NewsletterSubscriber.email) == email)
    )
    if existing:
        raise HTTPException(status_code=409, detail="Email already subscribed")

    db.add(NewsletterSubscriber(email=email, is_active=True))
    await db.commit()
    logger.info(f"Newsletter subscriber added: {email}")

    return {"message": "Successfully subscribed to newsletter"}
