from __future__ import annotations

import random

import pytest

from app.services import seo_copywriter as copywriter_mod
from app.services.seo_copywriter import SEOResponseError, build_prompt, parse_reply
from app.services.seo_generator import SEOGenerator, short_text, tour_duration, truncate

TOUR = {
    "title": {"en": "Classic Uzbekistan", "de": "Klassisches Usbekistan"},
    "destination": "Samarkand",
    "duration": 7,
    "type": "cultural",
    "highlights": {"en": "Registan square at dawn. Silk weaving in Margilan. Plov in Tashkent."},
    "included": {"en": ["Hotels", "Guide", "Transfers", "Dinners"]},
    "itinerary": [
        {"day": 1, "title": {"en": "Arrival in Tashkent"}},
        {"day": 2, "title": {"en": "Train to Samarkand"}},
    ],
}


# ── Template generator ────────────────────────────────────────────────────────


def test_short_text_keeps_whole_sentences():
    text = "First sentence here. Second one is a bit longer. Third."
    assert short_text(text, 40) == "First sentence here."
    assert short_text(["a", "b", "c", "d"], 80) == "a, b, c"
    assert short_text("", 80) == ""


def test_truncate():
    assert truncate("x" * 60, 60) == "x" * 60
    assert truncate("x" * 61, 60) == "x" * 57 + "..."


def test_generate_fills_templates_and_collects_keywords():
    result = SEOGenerator(rng=random.Random(3)).generate(TOUR, "en")

    assert set(result) == {"metaTitle", "metaDescription", "keywords"}
    assert len(result["metaTitle"]) <= 60
    assert len(result["metaDescription"]) <= 160
    assert "{" not in result["metaTitle"] + result["metaDescription"]

    keywords = result["keywords"].split(", ")
    assert keywords[0] == "samarkand tour"
    assert "cultural tour samarkand" in keywords
    assert len(keywords) == len(set(keywords)) <= 10
    assert keywords == [k.lower() for k in keywords]


def test_generate_adds_place_names_from_itinerary():
    tour = dict(TOUR, itinerary=[{"title": {"en": "Khiva"}}])
    keywords = SEOGenerator(rng=random.Random(0)).generate(tour, "en")["keywords"].split(", ")
    assert keywords[-1] == "khiva"


def test_generate_localizes_and_falls_back():
    result = SEOGenerator(rng=random.Random(1)).generate(TOUR, "de")
    assert "samarkand reise" in result["keywords"]
    assert "klassisches usbekistan" in result["keywords"]

    bare = SEOGenerator(rng=random.Random(1)).generate({}, "ru")
    assert "Uzbekistan" in bare["metaTitle"] or "Uzbekistan" in bare["metaDescription"]
    assert "uzbekistan тур" in bare["keywords"]
    assert "tour" in bare["keywords"]


def test_generate_seo_endpoint(client):
    r = client.post("/api/generate-seo", json={"tourData": TOUR, "language": "en"})
    assert r.status_code == 200
    assert r.json()["keywords"].startswith("samarkand tour")


def test_generate_seo_endpoint_validation(client):
    r = client.post("/api/generate-seo", json={"tourData": TOUR})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing tourData or language"

    assert client.post("/api/generate-seo", json={"language": "en"}).status_code == 400
    assert client.post("/api/generate-seo", json={"tourData": TOUR, "language": "fr"}).status_code == 400


# ── LLM copywriter ────────────────────────────────────────────────────────────


def test_build_prompt_truncates_content_and_names_language():
    prompt = build_prompt("Visa guide", "y" * 900, "ru")
    assert "Title: Visa guide" in prompt
    assert "y" * 500 in prompt
    assert "y" * 501 not in prompt
    assert "in Russian" in prompt

    assert "Content excerpt" not in build_prompt("Visa guide", None, "en")


def test_parse_reply_accepts_fenced_json():
    assert parse_reply('```json\n{"meta_title": "T"}\n```') == {"meta_title": "T"}
    assert parse_reply('{"keywords": "a, b"}') == {"keywords": "a, b"}


@pytest.mark.parametrize("reply", ["", "not json", "[1, 2]"])
def test_parse_reply_rejects_bad_output(reply):
    with pytest.raises(SEOResponseError):
        parse_reply(reply)


class _FakeLLM:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, system, user, **kwargs):
        self.calls.append((system, user, kwargs))
        if self.error:
            raise self.error
        return self.reply


def test_ai_seo_returns_parsed_metadata(client, monkeypatch):
    fake = _FakeLLM(reply='{"meta_title": "Visa guide", "keywords": "visa, uzbekistan"}')
    monkeypatch.setattr(copywriter_mod, "llm_client", fake)

    r = client.post("/api/ai/seo", json={"title": "Visa guide", "content": "How to apply", "locale": "de"})
    assert r.status_code == 200
    assert r.json() == {"meta_title": "Visa guide", "keywords": "visa, uzbekistan"}
    assert fake.calls[0][2]["json_mode"] is True
    assert "in German" in fake.calls[0][1]


def test_ai_seo_requires_title(client):
    r = client.post("/api/ai/seo", json={"content": "x"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Title is required"


def test_ai_seo_without_provider(client):
    r = client.post("/api/ai/seo", json={"title": "Visa guide"})
    assert r.status_code == 500
    assert r.json()["detail"] == "AI provider not configured"


def test_ai_seo_unparseable_and_failed_provider(client, monkeypatch):
    monkeypatch.setattr(copywriter_mod, "llm_client", _FakeLLM(reply="Sure! Here you go"))
    r = client.post("/api/ai/seo", json={"title": "Visa guide"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to parse AI response"

    monkeypatch.setattr(copywriter_mod, "llm_client", _FakeLLM(error=RuntimeError("boom")))
    r = client.post("/api/ai/seo", json={"title": "Visa guide"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to generate SEO content"


def test_generate_seo_endpoint_accepts_list_highlights(client):
    tour = {"title": {"en": "Fann Trek"}, "destination": "Tajikistan", "highlights": {"en": ["Lakes", "Passes", "Camps", "Stars"]}}

    seen = set()
    for _ in range(30):
        r = client.post("/api/generate-seo", json={"tourData": tour, "language": "en"})
        assert r.status_code == 200
        seen.add(r.json()["metaDescription"])

    assert any("Lakes, Passes, Camps" in description for description in seen)
    assert not any("Stars" in description for description in seen)


def test_generate_seo_endpoint_defaults_blank_and_null_fields(client):
    r = client.post(
        "/api/generate-seo",
        json={
            "tourData": {
                "title": {"en": "Classic Uzbekistan", "de": None},
                "duration": "",
                "type": None,
                "highlights": {"en": None},
                "itinerary": [{"day": 1, "title": None}],
            },
            "language": "de",
        },
    )
    assert r.status_code == 200
    keywords = r.json()["keywords"].split(", ")
    assert "classic uzbekistan" in keywords
    assert "1 tage tour" in keywords
    assert "uzbekistan reise" in keywords


def test_tour_duration_coerces_form_values():
    assert tour_duration("") == 1
    assert tour_duration(" 5 ") == 5
    assert tour_duration(None) == 1
    assert tour_duration(0) == 1
    assert tour_duration(3) == 3
