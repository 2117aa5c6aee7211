from pydantic import AliasChoices, BaseModel, Field, model_validator

from app.schemas.common import LocalizedList, LocalizedPayload, LocalizedText


class ItineraryDay(LocalizedPayload):
    day: int | None = Field(None, validation_alias=AliasChoices("day", "day_number"))
    title: LocalizedText | None = None
    description: LocalizedText | None = None


class TourFields(LocalizedPayload):
    """Fields shared by create and update; every key accepts its camelCase alias."""

    slug: str | None = None
    title: LocalizedText | None = None
    description: LocalizedText | None = None
    highlights: LocalizedText | None = None
    destination: str | None = None
    category_id: int | None = Field(None, validation_alias=AliasChoices("category_id", "categoryId"))
    duration: int | None = Field(None, ge=1)
    price: float | None = None
    main_image: str | None = Field(None, validation_alias=AliasChoices("main_image", "mainImage"))
    gallery_images: list[str] | None = Field(
        None, validation_alias=AliasChoices("gallery_images", "galleryImages", "images")
    )
    tour_type: str | None = Field(None, validation_alias=AliasChoices("tour_type", "type"))
    status: str | None = None
    is_bestseller: bool | None = Field(
        None, validation_alias=AliasChoices("is_bestseller", "isBestseller")
    )
    featured: bool | None = None
    group_size: str | None = Field(None, validation_alias=AliasChoices("group_size", "groupSize"))
    included: LocalizedList | None = None
    not_included: LocalizedList | None = Field(
        None, validation_alias=AliasChoices("not_included", "notIncluded")
    )
    itinerary: list[ItineraryDay] | None = None


class TourCreate(TourFields):
    @model_validator(mode="after")
    def _check_required(self):
        if not self.localized("title")["title_en"]:
            raise ValueError("Missing required field: title")
        if not self.destination:
            raise ValueError("Missing required field: destination")
        if not self.price or self.price <= 0:
            raise ValueError("Missing required field: price")
        return self


class TourUpdate(TourFields):
    pass


class TourSeoDay(BaseModel):
    day: int | str | None = None
    title: dict[str, str | None] | None = None
    description: dict[str, str | None] | None = None


class TourSeoData(BaseModel):
    """Tour as the admin form holds it; blanks and nulls fall back to defaults when generating."""

    title: dict[str, str | None] | None = None
    destination: str | None = None
    duration: int | str | None = None
    type: str | None = None
    description: dict[str, str | None] | None = None
    highlights: dict[str, str | list[str] | None] | None = None
    included: dict[str, list[str] | None] | None = None
    itinerary: list[TourSeoDay] | None = None


class GenerateSeoRequest(BaseModel):
    tour_data: TourSeoData | None = Field(None, validation_alias=AliasChoices("tourData", "tour_data"))
    language: str | None = None
