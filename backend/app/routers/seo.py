"""SEO router: template SEO for tours and LLM-written SEO for blog posts."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.schemas.tour import GenerateSeoRequest
from app.services.llm_client import LLMNotConfiguredError
from app.services.localization import DEFAULT_LOCALE
from app.services.seo_copywriter import SEOResponseError, seo_copywriter
from app.services.seo_generator import seo_generator

logger = logging.getLogger(__name__)

router = APIRouter()


class AiSeoRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    locale: str = DEFAULT_LOCALE


@router.post("/generate-seo")
async def generate_seo(req: GenerateSeoRequest):
    """Meta title, meta description and keywords for a tour from fixed templates."""
    if req.tour_data is None or not req.language:
        raise HTTPException(status_code=400, detail="Missing tourData or language")
    if not seo_generator.supports(req.language):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {req.language}")

    return seo_generator.generate(req.tour_data.model_dump(), req.language)


@router.post("/ai/seo")
async def generate_ai_seo(req: AiSeoRequest):
    """Ask the LLM for blog post SEO metadata."""
    if not req.title:
        raise HTTPException(status_code=400, detail="Title is required")

    try:
        return await seo_copywriter.generate(req.title, req.content, req.locale)
    except LLMNotConfiguredError:
        raise HTTPException(status_code=500, detail="AI provider not configured")
    except SEOResponseError:
        raise HTTPException(status_code=500, detail="Failed to parse AI response")
    except RuntimeError as e:
        logger.error(f"AI SEO generation failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate SEO content")
