from pydantic import Field

from app.schemas.common import LocalizedPayload, LocalizedText

SEO_FIELDS = ("meta_title", "meta_description", "keywords", "og_title", "og_description")


class BlogPostPayload(LocalizedPayload):
    """Blog post body; SEO columns arrive flat as meta_title_en, og_description_ru, etc."""

    slug: str | None = None
    title: LocalizedText | None = None
    excerpt: LocalizedText | None = None
    content: LocalizedText | None = None
    image: str = ""
    gallery: list[str] = []
    author: str = ""
    category: str = ""
    tags: list[str] = []
    status: str = "draft"
    read_time: int = Field(0, ge=0)

    def columns(self) -> dict:
        """Every editable column, defaulted."""
        data = {
            "image": self.image,
            "gallery": self.gallery,
            "author": self.author,
            "category": self.category,
            "tags": self.tags,
            "status": self.status,
            "read_time": self.read_time,
        }
        for field in ("title", "excerpt", "content") + SEO_FIELDS:
            data.update(self.localized(field))
        return data
