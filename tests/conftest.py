import pytest
from fastapi.testclient import TestClient

from cart_offer.main import create_app
from cart_offer.services.offer_store import OfferStore
from cart_offer.services.segment_resolver import StaticSegmentResolver

# Doble del servicio de segmentos: cualquier otro user_id falla
USER_SEGMENTS = {1: "p1", 2: "p2", 3: "p3"}


@pytest.fixture
def store():
    s = OfferStore("sqlite://")
    yield s
    s.dispose()


@pytest.fixture
def resolver():
    return StaticSegmentResolver(USER_SEGMENTS)


@pytest.fixture
def client(store, resolver):
    app = create_app(store=store, resolver=resolver)
    with TestClient(app) as c:
        yield c
