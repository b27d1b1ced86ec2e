def test_health_returns_200(client):
    r = client.get("/health")
    assert r.status_code == 200
    js = r.json()
    assert js["status"] == "ok" and js["offers"] == 0


def test_health_counts_offers(client):
    client.post(
        "/api/v1/offer",
        json={"restaurant_id": 1, "offer_type": "FLATX", "offer_value": 10, "segments": ["p1"]},
    )
    assert client.get("/health").json()["offers"] == 1
