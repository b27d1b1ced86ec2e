import logging
from typing import Iterable, Optional, Tuple

from ..models.offer import Offer, OfferType
from .offer_store import OfferStore

logger = logging.getLogger(__name__)


def select_offer(offers: Iterable[Offer], segment: Optional[str]) -> Optional[Offer]:
    """Primera oferta (en orden de alta) que contiene el segmento. Sin stacking."""
    for offer in offers:
        if offer.matches(segment):
            return offer
    return None


def compute_discount(offer: Offer, cart_value: int) -> int:
    if offer.offer_type is OfferType.FLAT_AMOUNT:
        return offer.value
    # el total con descuento se trunca: 333 - 49.95 -> 283, o sea descuento redondeado hacia arriba
    return -(-cart_value * offer.value // 100)


def discounted_value(offer: Offer, cart_value: int) -> int:
    return max(cart_value - compute_discount(offer, cart_value), 0)


class DiscountEngine:
    """Sin estado propio: solo lee el store en el momento de la llamada."""

    def __init__(self, store: OfferStore):
        self.store = store

    def apply_offer(self, restaurant_id: int, cart_value: int, segment: Optional[str]) -> Tuple[int, Optional[Offer]]:
        offers = self.store.lookup(restaurant_id)
        if not offers:
            logger.debug("no offers restaurant_id=%s", restaurant_id)
            return cart_value, None

        offer = select_offer(offers, segment)
        if offer is None:
            logger.debug("no offer for segment=%s restaurant_id=%s", segment, restaurant_id)
            return cart_value, None

        result = discounted_value(offer, cart_value)
        logger.debug(
            "offer applied restaurant_id=%s sequence=%s cart_value=%s -> %s",
            restaurant_id,
            offer.sequence,
            cart_value,
            result,
        )
        return result, offer

    def apply(self, restaurant_id: int, cart_value: int, segment: Optional[str]) -> int:
        return self.apply_offer(restaurant_id, cart_value, segment)[0]
