import os
import sys

import requests

BASE = os.environ.get("CART_OFFER_BASE", "http://127.0.0.1:8010")

# restaurante, tipo, valor, segmentos
DEMO_OFFERS = [
    (1, "FLATX", 10, ["p1"]),
    (1, "FLAT%", 15, ["p2", "p3"]),
    (2, "FLAT%", 10, ["p1", "p2"]),
]


def main():
    failed = 0
    for restaurant_id, offer_type, value, segments in DEMO_OFFERS:
        body = {
            "restaurant_id": restaurant_id,
            "offer_type": offer_type,
            "offer_value": value,
            "segments": segments,
        }
        r = requests.post(f"{BASE}/api/v1/offer", json=body, timeout=10)
        print(f"Seed offer: {restaurant_id} {offer_type} {value} {segments} -> {r.status_code}")
        if r.status_code != 200:
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
