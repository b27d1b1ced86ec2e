from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response

from ..core.errors import OfferValidationError
from ..core.schemas import OfferCreated, OfferIn, OfferOut, RestaurantOffers
from ..deps import get_ledger, get_store, get_validator
from ..services.offer_ledger import OfferCreationLedger
from ..services.offer_store import OfferStore
from ..services.offer_validator import OfferValidator

router = APIRouter(prefix="/api/v1/offer", tags=["offer"])


@router.post("", response_model=OfferCreated, summary="Registrar oferta de restaurante")
def create_offer(
    body: OfferIn,
    response: Response,
    validator: OfferValidator = Depends(get_validator),
    ledger: OfferCreationLedger = Depends(get_ledger),
    idempotency_key: Optional[str] = Header(default=None, alias="Idempotency-Key"),
):
    def _create():
        return validator.create(body.restaurant_id, body.offer_type, body.offer_value, body.segments)

    try:
        if idempotency_key:
            _, replay = ledger.create_once(idempotency_key, _create)
            if replay:
                response.headers["Idempotent-Replay"] = "true"
        else:
            _create()
    except OfferValidationError as e:
        raise HTTPException(status_code=400, detail=e.as_detail())
    return OfferCreated()


@router.get("/{restaurant_id}", response_model=RestaurantOffers, summary="Ofertas en orden de alta")
def list_offers(restaurant_id: int, store: OfferStore = Depends(get_store)):
    offers = store.lookup(restaurant_id)
    return RestaurantOffers(
        restaurant_id=restaurant_id,
        offers=[
            OfferOut(
                sequence=o.sequence,
                offer_type=o.offer_type.value,
                offer_value=o.value,
                segments=list(o.segments),
            )
            for o in offers
        ],
    )
