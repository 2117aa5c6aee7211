from __future__ import annotations


def test_save_sets_cookie_and_counts(client, make_tour):
    tour = make_tour()

    r = client.post("/api/saved-tours", json={"tour_id": tour["id"]}, headers={"x-forwarded-for": "10.0.0.1, 10.0.0.2"})
    assert r.status_code == 200
    assert "session_id" in r.cookies
    saved = r.json()
    assert saved["ip_address"] == "10.0.0.1"

    again = client.post("/api/saved-tours", json={"tour_id": tour["id"]}).json()
    assert again == {"message": "Already saved", "id": saved["id"]}

    assert client.get("/api/saved-tours", params={"tour_id": tour["id"]}).json() == {"isSaved": True}
    assert client.get(f"/api/tours/{tour['id']}").json()["saves_count"] == 1

    mine = client.get("/api/saved-tours").json()
    assert [s["tour"]["slug"] for s in mine] == [tour["slug"]]


def test_stats_group_saves_by_tour(client, make_tour):
    popular = make_tour(title={"en": "Popular"})
    quiet = make_tour(title={"en": "Quiet"})

    client.post("/api/saved-tours", json={"tour_id": popular["id"]})
    client.post("/api/saved-tours", json={"tour_id": quiet["id"]})
    client.cookies.clear()
    client.post("/api/saved-tours", json={"tour_id": popular["id"]})

    stats = client.get("/api/saved-tours", params={"stats": "true"}).json()
    assert stats["total_saves"] == 3
    assert [(t["tour"]["slug"], t["count"]) for t in stats["tours"]] == [("popular", 2), ("quiet", 1)]
    assert len(stats["tours"][0]["saves"]) == 2


def test_unsave_decrements_without_going_negative(client, make_tour):
    tour = make_tour()
    client.post("/api/saved-tours", json={"tour_id": tour["id"]})

    r = client.delete("/api/saved-tours", params={"tour_id": tour["id"]})
    assert r.json() == {"success": True}
    assert client.get(f"/api/tours/{tour['id']}").json()["saves_count"] == 0
    assert client.get("/api/saved-tours", params={"tour_id": tour["id"]}).json() == {"isSaved": False}

    client.delete("/api/saved-tours", params={"tour_id": tour["id"]})
    assert client.get(f"/api/tours/{tour['id']}").json()["saves_count"] == 0


def test_tour_id_required(client):
    assert client.post("/api/saved-tours", json={}).status_code == 400
    assert client.delete("/api/saved-tours").status_code == 400
