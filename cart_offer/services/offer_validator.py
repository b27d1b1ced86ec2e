import logging
from typing import Iterable, Optional

from ..core.errors import OfferValidationError
from ..models.offer import INT_MAX, Offer, OfferType
from .offer_store import OfferStore

logger = logging.getLogger(__name__)

INVALID_RESTAURANT_ID = "INVALID_RESTAURANT_ID"
INVALID_OFFER_TYPE = "INVALID_OFFER_TYPE"
OFFER_VALUE_OUT_OF_RANGE = "OFFER_VALUE_OUT_OF_RANGE"
EMPTY_SEGMENTS = "EMPTY_SEGMENTS"

PERCENT_MAX = 100


def _norm_segments(segments: Optional[Iterable[str]]) -> tuple:
    out = []
    for s in segments or ():
        k = str(s).strip()
        if k and k not in out:
            out.append(k)
    return tuple(out)


def build_offer(restaurant_id: int, offer_type: str, offer_value: int, segments) -> Offer:
    """
    Valida la solicitud de alta y devuelve la Offer (sin sequence).
    Orden de reglas: restaurante, tipo, valor, segmentos.
    """
    if restaurant_id is None or not 0 < restaurant_id <= INT_MAX:
        raise OfferValidationError(
            INVALID_RESTAURANT_ID, f"restaurant_id must be in 1..{INT_MAX}, got {restaurant_id}"
        )

    kind = OfferType.from_literal(offer_type)
    if kind is None:
        allowed = ", ".join(t.value for t in OfferType)
        raise OfferValidationError(INVALID_OFFER_TYPE, f"offer_type {offer_type!r} is not one of: {allowed}")

    if offer_value is None or not 0 <= offer_value <= INT_MAX:
        raise OfferValidationError(
            OFFER_VALUE_OUT_OF_RANGE, f"offer_value must be in 0..{INT_MAX}, got {offer_value}"
        )
    if kind is OfferType.FLAT_PERCENTAGE and offer_value > PERCENT_MAX:
        raise OfferValidationError(
            OFFER_VALUE_OUT_OF_RANGE, f"percentage offer_value must be <= {PERCENT_MAX}, got {offer_value}"
        )

    segs = _norm_segments(segments)
    if not segs:
        raise OfferValidationError(EMPTY_SEGMENTS, "segments must contain at least one label")

    return Offer(restaurant_id=restaurant_id, offer_type=kind, value=int(offer_value), segments=segs)


class OfferValidator:
    """Puerta de entrada al store: solo llegan ofertas bien formadas."""

    def __init__(self, store: OfferStore):
        self.store = store

    def create(self, restaurant_id: int, offer_type: str, offer_value: int, segments) -> Offer:
        try:
            offer = build_offer(restaurant_id, offer_type, offer_value, segments)
        except OfferValidationError as e:
            logger.info("offer rejected restaurant_id=%s code=%s", restaurant_id, e.code)
            raise
        return self.store.add(offer)
