"""Template-based SEO text for tours: meta title, meta description and keywords per language."""

import random
import re

from app.services.localization import pick_locale

META_TITLE_MAX = 60
META_DESCRIPTION_MAX = 160
MAX_KEYWORDS = 10

SEO_TEMPLATES = {
    "en": {
        "meta_title": [
            "{title} | {duration} Days Tour in {destination}",
            "{title} - Best {type} Tour in {destination}",
            "Explore {destination}: {title} | {duration} Days",
        ],
        "meta_description": [
            "Discover {destination} with our {duration}-day {title}. {highlights_short}. Book now for an unforgettable experience!",
            "Experience the best of {destination} on our {title}. {duration} days of adventure including {included_short}. Reserve your spot today!",
            "Join our {title} in {destination}. {highlights_short}. Perfect {type} tour for {duration} days.",
        ],
        "keywords": [
            "{destination} tour",
            "{destination} travel",
            "{type} tour {destination}",
            "{title}",
            "{duration} day tour",
            "best tours {destination}",
            "{destination} vacation",
            "{destination} trip",
        ],
    },
    "de": {
        "meta_title": [
            "{title} | {duration} Tage Tour in {destination}",
            "{title} - Beste {type} Tour in {destination}",
            "Entdecken Sie {destination}: {title} | {duration} Tage",
        ],
        "meta_description": [
            "Entdecken Sie {destination} mit unserer {duration}-tägigen {title}. {highlights_short}. Buchen Sie jetzt für ein unvergessliches Erlebnis!",
            "Erleben Sie das Beste von {destination} bei unserer {title}. {duration} Tage Abenteuer inklusive {included_short}. Reservieren Sie heute!",
            "Begleiten Sie unsere {title} in {destination}. {highlights_short}. Perfekte {type} Tour für {duration} Tage.",
        ],
        "keywords": [
            "{destination} Reise",
            "{destination} Tour",
            "{type} Tour {destination}",
            "{title}",
            "{duration} Tage Tour",
            "Beste Touren {destination}",
            "{destination} Urlaub",
            "{destination} Rundreise",
        ],
    },
    "ru": {
        "meta_title": [
            "{title} | {duration} Дней Тур в {destination}",
            "{title} - Лучший {type} тур в {destination}",
            "Откройте {destination}: {title} | {duration} Дней",
        ],
        "meta_description": [
            "Откройте для себя {destination} с нашим {duration}-дневным туром {title}. {highlights_short}. Забронируйте сейчас!",
            "Испытайте лучшее из {destination} в нашем туре {title}. {duration} дней приключений включая {included_short}. Забронируйте сегодня!",
            "Присоединяйтесь к нашему туру {title} в {destination}. {highlights_short}. Идеальный {type} тур на {duration} дней.",
        ],
        "keywords": [
            "{destination} тур",
            "{destination} путешествие",
            "{type} тур {destination}",
            "{title}",
            "{duration} дневный тур",
            "лучшие туры {destination}",
            "{destination} отдых",
            "{destination} поездка",
        ],
    },
}

TOUR_TYPE_LABELS = {
    "cultural": {"en": "Cultural", "de": "Kultur", "ru": "Культурный"},
    "adventure": {"en": "Adventure", "de": "Abenteuer", "ru": "Приключенческий"},
    "historical": {"en": "Historical", "de": "Historisch", "ru": "Исторический"},
    "group": {"en": "Group", "de": "Gruppe", "ru": "Групповой"},
    "private": {"en": "Private", "de": "Privat", "ru": "Частный"},
}

_PLACEHOLDER = re.compile(r"\{(title|destination|duration|type|highlights_short|included_short)\}")


def fill_template(template: str, values: dict) -> str:
    return _PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), template)


def short_text(text, max_length: int) -> str:
    """Whole sentences of `text` fitting in `max_length`; lists give their first three items."""
    if not text:
        return ""
    if isinstance(text, list):
        return ", ".join(str(item) for item in text[:3])

    text = str(text)
    sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
    result = ""
    for sentence in sentences:
        if len(result + sentence) > max_length:
            break
        result += sentence.strip() + ". "
    return result.strip() or text[:max_length]


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def tour_duration(value) -> int | str:
    """Day count from a form value; blank or zero means a one-day tour."""
    if isinstance(value, str):
        value = value.strip()
        if value.isdecimal():
            value = int(value)
    return value or 1


class SEOGenerator:
    """Fills the per-language templates with tour data."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def supports(self, language: str) -> bool:
        return language in SEO_TEMPLATES

    def generate(self, tour: dict, language: str) -> dict:
        templates = SEO_TEMPLATES[language]

        tour_type = (tour.get("type") or "").strip()
        highlights = tour.get("highlights") or {}
        included = tour.get("included") or {}
        values = {
            "title": pick_locale(tour.get("title"), language, "Tour"),
            "destination": tour.get("destination") or "Uzbekistan",
            "duration": tour_duration(tour.get("duration")),
            "type": TOUR_TYPE_LABELS.get(tour_type, {}).get(language) or tour_type,
            "highlights_short": short_text(highlights.get(language) or highlights.get("en"), 80),
            "included_short": ", ".join((included.get(language) or included.get("en") or [])[:3]),
        }

        meta_title = truncate(
            fill_template(self._rng.choice(templates["meta_title"]), values), META_TITLE_MAX
        )
        meta_description = truncate(
            fill_template(self._rng.choice(templates["meta_description"]), values),
            META_DESCRIPTION_MAX,
        )

        # dict preserves insertion order, so it doubles as an ordered set
        keywords: dict[str, None] = {}
        for template in templates["keywords"]:
            keyword = fill_template(template, values).lower().strip()
            if keyword:
                keywords[keyword] = None

        # Capitalised words in day titles are usually place names
        for day in tour.get("itinerary") or []:
            day_title = pick_locale(day.get("title"), language)
            for word in day_title.split():
                if len(word) > 3 and word[0].isupper() and word[0].isascii():
                    keywords[word.lower()] = None

        return {
            "metaTitle": meta_title,
            "metaDescription": meta_description,
            "keywords": ", ".join(list(keywords)[:MAX_KEYWORDS]),
        }


seo_generator = SEOGenerator()
