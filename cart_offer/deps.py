from fastapi import Request

from .services.discount_engine import DiscountEngine
from .services.offer_ledger import OfferCreationLedger
from .services.offer_store import OfferStore
from .services.offer_validator import OfferValidator
from .services.segment_resolver import SegmentResolver


# Dependencias FastAPI: las instancias viven en app.state (ver main.create_app)
def get_store(request: Request) -> OfferStore:
    return request.app.state.offer_store


def get_validator(request: Request) -> OfferValidator:
    return request.app.state.offer_validator


def get_engine(request: Request) -> DiscountEngine:
    return request.app.state.discount_engine


def get_resolver(request: Request) -> SegmentResolver:
    return request.app.state.segment_resolver


def get_ledger(request: Request) -> OfferCreationLedger:
    return request.app.state.offer_ledger
