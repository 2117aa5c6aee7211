from pydantic import BaseModel, ConfigDict

from app.services.localization import LOCALES, localized_columns


class LocalizedText(BaseModel):
    en: str = ""
    de: str = ""
    ru: str = ""


class LocalizedList(BaseModel):
    en: list[str] = []
    de: list[str] = []
    ru: list[str] = []


class LocalizedPayload(BaseModel):
    """Request body accepting both nested {en, de, ru} objects and flat field_<lang> keys.

    Flat keys are not declared; they arrive through `model_extra`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def localized(self, field: str, default: str | list = "") -> dict:
        nested = getattr(self, field, None)
        if isinstance(nested, BaseModel):
            nested = nested.model_dump()
        return localized_columns(field, nested, self.model_extra, default)

    def has_localized(self, field: str) -> bool:
        if getattr(self, field, None) is not None:
            return True
        extra = self.model_extra or {}
        return any(f"{field}_{lang}" in extra for lang in LOCALES)

    def extra_value(self, key: str, default=None):
        return (self.model_extra or {}).get(key, default)
