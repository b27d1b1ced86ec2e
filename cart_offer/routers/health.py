from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..deps import get_store
from ..services.offer_store import OfferStore

router = APIRouter(tags=["health"])


@router.get("/health", operation_id="health_v1")
def health(store: OfferStore = Depends(get_store)):
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat(), "offers": store.count()}
