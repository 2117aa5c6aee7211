from __future__ import annotations


# ── Destinations ──────────────────────────────────────────────────────────────


def test_destinations_crud_and_filters(client):
    r = client.post(
        "/api/destinations",
        json={"name": {"en": "Samarkand", "ru": "Самарканд"}, "country": "Uzbekistan"},
    )
    assert r.status_code == 201
    samarkand = r.json()
    assert samarkand["status"] == "active"
    assert samarkand["featured"] is False
    assert samarkand["tours_count"] == 0
    assert samarkand["image"] == ""

    client.post("/api/destinations", json={"name_en": "Bishkek", "country": "Kyrgyzstan"})
    client.post("/api/destinations", json={"name": {"en": "Bukhara"}, "country": "Uzbekistan"})

    names = [d["name_en"] for d in client.get("/api/destinations").json()]
    assert names == ["Bishkek", "Bukhara", "Samarkand"]

    uzbek = client.get("/api/destinations", params={"country": "Uzbekistan"}).json()
    assert [d["name_en"] for d in uzbek] == ["Bukhara", "Samarkand"]

    updated = client.put(
        f"/api/destinations/{samarkand['id']}", json={"featured": True, "region": "Zarafshan"}
    ).json()
    assert updated["featured"] is True
    assert updated["region"] == "Zarafshan"
    assert updated["name_ru"] == "Самарканд"

    assert client.delete(f"/api/destinations/{samarkand['id']}").status_code == 200
    assert client.get(f"/api/destinations/{samarkand['id']}").status_code == 404


# ── Reviews ───────────────────────────────────────────────────────────────────


def test_review_defaults_and_tour_summary(client, make_tour):
    tour = make_tour()
    r = client.post(
        "/api/reviews",
        json={"tour_id": tour["id"], "author_name": "Maria", "rating": 5, "comment": "Wonderful"},
    )
    assert r.status_code == 201
    review = r.json()
    assert review["status"] == "pending"
    assert review["source"] == "website"
    assert review["tour"] == {"id": tour["id"], "slug": tour["slug"], "title_en": tour["title_en"]}


def test_review_requires_author_rating_comment(client):
    r = client.post("/api/reviews", json={"author_name": "Maria", "comment": "Nice"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required field: rating"

    r = client.post("/api/reviews", json={"author_name": "Maria", "rating": 6, "comment": "Nice"})
    assert r.status_code == 400


def test_review_moderation_flow(client, make_tour):
    tour = make_tour()
    first = client.post(
        "/api/reviews", json={"tour_id": tour["id"], "author_name": "A", "rating": 4, "comment": "Good"}
    ).json()
    client.post("/api/reviews", json={"author_name": "B", "rating": 3, "comment": "Ok"})

    approved = client.put(f"/api/reviews/{first['id']}", json={"status": "approved"}).json()
    assert approved["status"] == "approved"
    assert approved["comment"] == "Good"

    assert [r["id"] for r in client.get("/api/reviews", params={"status": "approved"}).json()] == [first["id"]]
    assert [r["id"] for r in client.get("/api/reviews", params={"tour_id": tour["id"]}).json()] == [first["id"]]

    unlinked = client.put(f"/api/reviews/{first['id']}", json={"tour_id": None}).json()
    assert unlinked["tour"] is None

    assert client.delete(f"/api/reviews/{first['id']}").status_code == 200
    assert client.get(f"/api/reviews/{first['id']}").status_code == 404


# ── Blog ──────────────────────────────────────────────────────────────────────


def test_blog_create_get_by_slug_and_replace(client):
    r = client.post(
        "/api/blog",
        json={
            "title": {"en": "Best Time To Visit", "de": "Beste Reisezeit"},
            "content_en": "Spring and autumn.",
            "meta_title_en": "When to visit Uzbekistan",
            "tags": ["seasons"],
        },
    )
    assert r.status_code == 201
    post = r.json()
    assert post["slug"] == "best-time-to-visit"
    assert post["status"] == "draft"
    assert post["published_at"] is None
    assert post["content_en"] == "Spring and autumn."
    assert post["meta_title_en"] == "When to visit Uzbekistan"

    by_slug = client.get("/api/blog/slug/best-time-to-visit")
    assert by_slug.status_code == 200
    assert by_slug.json()["id"] == post["id"]

    replaced = client.put(
        f"/api/blog/{post['id']}",
        json={"title": {"en": "Best Time To Visit"}, "status": "published"},
    ).json()
    assert replaced["status"] == "published"
    assert replaced["published_at"] is not None
    assert replaced["title_de"] == ""
    assert replaced["tags"] == []
    assert replaced["slug"] == "best-time-to-visit"

    assert client.delete(f"/api/blog/{post['id']}").json() == {"success": True}
    assert client.get("/api/blog/slug/best-time-to-visit").status_code == 404


def test_blog_list_filters(client):
    client.post("/api/blog", json={"title": {"en": "One"}, "category": "tips", "status": "published"})
    client.post("/api/blog", json={"title": {"en": "Two"}, "category": "news"})

    published = client.get("/api/blog", params={"status": "published"}).json()
    assert [p["slug"] for p in published] == ["one"]
    assert [p["slug"] for p in client.get("/api/blog", params={"category": "news"}).json()] == ["two"]
    assert len(client.get("/api/blog", params={"limit": 1}).json()) == 1


def test_blog_without_title_or_slug_is_rejected(client):
    r = client.post("/api/blog", json={"content_en": "text"})
    assert r.status_code == 400


# ── About ─────────────────────────────────────────────────────────────────────


def test_about_defaults_then_upsert(client):
    about = client.get("/api/about").json()
    assert about["story_title_en"] == "Our Story"
    assert about["story_title_de"] == "Unsere Geschichte"
    assert about["team_title_ru"] == "Наша команда"
    assert about["team_members"] == []

    saved = client.put(
        "/api/about",
        json={"hero_subtitle_en": "Since 2010", "stats": [{"label": "Tours", "value": "120"}]},
    ).json()
    assert saved["hero_subtitle_en"] == "Since 2010"
    assert saved["story_title_en"] == "Our Story"

    again = client.put("/api/about", json={"story_title_en": "Who we are"}).json()
    assert again["id"] == saved["id"]
    assert again["story_title_en"] == "Who we are"
    assert client.get("/api/about").json()["story_title_en"] == "Who we are"


# ── Contact & newsletter ──────────────────────────────────────────────────────


def test_contact_message_is_stored(client):
    r = client.post(
        "/api/contact",
        json={"name": "Tom", "email": "tom@example.com", "subject": "Visa", "message": "Do I need one?"},
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Message sent successfully"}

    messages = client.get("/api/contact").json()
    assert len(messages) == 1
    assert messages[0]["status"] == "new"
    assert messages[0]["subject"] == "Visa"


def test_contact_validation(client):
    base = {"name": "Tom", "email": "tom@example.com", "subject": "Visa", "message": "Hi"}

    r = client.post("/api/contact", json={**base, "email": "tom-at-example"})
    assert r.status_code == 400

    body = dict(base)
    del body["subject"]
    r = client.post("/api/contact", json=body)
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required field: subject"


def test_newsletter_subscribe_and_duplicate(client):
    r = client.post("/api/newsletter", json={"email": "Reader@Example.com"})
    assert r.status_code == 200
    assert r.json() == {"message": "Successfully subscribed to newsletter"}

    r = client.post("/api/newsletter", json={"email": "reader@example.com"})
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already subscribed"

    assert client.post("/api/newsletter", json={"email": "nope"}).status_code == 400
    assert client.post("/api/newsletter", json={}).status_code == 400


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "service": "silkroad-travel"}
