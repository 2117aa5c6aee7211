"""SEO copywriter: asks the LLM for blog post SEO metadata and parses its JSON reply."""

import json
import logging

from app.services.llm_client import llm_client
from app.services.localization import DEFAULT_LOCALE, LANGUAGE_NAMES

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are an SEO expert. Always respond with valid JSON only, no additional text."

USER_PROMPT = """You are an SEO expert for a travel agency website. Generate SEO metadata for a blog post.

Title: {title}
{content_line}
Generate the following in {language}:
1. meta_title: An SEO-optimized title (50-60 characters)
2. meta_description: A compelling meta description (150-160 characters)
3. keywords: 5-8 relevant keywords separated by commas
4. og_title: Open Graph title for social sharing
5. og_description: Open Graph description for social sharing (slightly longer, more engaging)

Respond ONLY with a valid JSON object in this exact format:
{{
  "meta_title": "...",
  "meta_description": "...",
  "keywords": "keyword1, keyword2, keyword3, ...",
  "og_title": "...",
  "og_description": "..."
}}"""

CONTENT_EXCERPT_CHARS = 500


class SEOResponseError(ValueError):
    """The LLM reply was empty or not a JSON object."""


def build_prompt(title: str, content: str | None, locale: str) -> str:
    content_line = f"Content excerpt: {content[:CONTENT_EXCERPT_CHARS]}\n" if content else ""
    language = LANGUAGE_NAMES.get(locale, LANGUAGE_NAMES[DEFAULT_LOCALE])
    return USER_PROMPT.format(title=title, content_line=content_line, language=language)


def parse_reply(text: str) -> dict:
    if not text:
        raise SEOResponseError("No content generated")

    # Some models wrap JSON in markdown fences
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        cleaned = cleaned.rsplit("```", 1)[0].strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise SEOResponseError(f"Failed to parse AI response: {e}") from e

    if not isinstance(data, dict):
        raise SEOResponseError("AI response is not a JSON object")
    return data


class SEOCopywriter:
    async def generate(self, title: str, content: str | None = None, locale: str = DEFAULT_LOCALE) -> dict:
        reply = await llm_client.complete(
            SYSTEM_PROMPT,
            build_prompt(title, content, locale),
            max_tokens=500,
            temperature=0.7,
            json_mode=True,
        )
        try:
            return parse_reply(reply)
        except SEOResponseError:
            logger.error(f"Unparseable SEO reply: {reply[:200]!r}")
            raise


seo_copywriter = SEOCopywriter()
