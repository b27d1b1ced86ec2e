import logging

from fastapi import APIRouter, Depends

from ..core.schemas import ApplyOfferIn, ApplyOfferOut
from ..deps import get_engine, get_resolver
from ..services.discount_engine import DiscountEngine
from ..services.segment_resolver import SegmentResolver, resolve_or_none

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


@router.post("/apply_offer", response_model=ApplyOfferOut, summary="Aplicar oferta al carrito")
def apply_offer(
    body: ApplyOfferIn,
    engine: DiscountEngine = Depends(get_engine),
    resolver: SegmentResolver = Depends(get_resolver),
):
    # 1) segmento (si falla -> None -> ninguna oferta aplica)
    segment = resolve_or_none(resolver, body.user_id)

    # 2) primera oferta que aplique + clamp en 0
    cart_value, offer = engine.apply_offer(body.restaurant_id, body.cart_value, segment)

    logger.info(
        "apply_offer restaurant_id=%s user_id=%s segment=%s sequence=%s %s -> %s",
        body.restaurant_id,
        body.user_id,
        segment,
        offer.sequence if offer else None,
        body.cart_value,
        cart_value,
    )
    return ApplyOfferOut(cart_value=cart_value)
