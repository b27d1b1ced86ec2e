from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.log import configure_logging
from .middleware.access_log import install_access_log
from .routers import cart, health, offer
from .services.discount_engine import DiscountEngine
from .services.offer_ledger import OfferCreationLedger
from .services.offer_store import OfferStore
from .services.offer_validator import OfferValidator
from .services.segment_resolver import HttpSegmentResolver, SegmentResolver


def create_app(
    settings: Optional[Settings] = None,
    resolver: Optional[SegmentResolver] = None,
    store: Optional[OfferStore] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)

    # Una sola instancia de store por app; validador y motor la comparten
    store = store or OfferStore(settings.database_url)
    app.state.settings = settings
    app.state.offer_store = store
    app.state.offer_validator = OfferValidator(store)
    app.state.discount_engine = DiscountEngine(store)
    app.state.offer_ledger = OfferCreationLedger(ttl=settings.idempotency_ttl)
    app.state.segment_resolver = resolver or HttpSegmentResolver(
        settings.segment_service_url, timeout=settings.segment_service_timeout
    )

    install_access_log(app)

    app.include_router(health.router)
    app.include_router(offer.router)
    app.include_router(cart.router)
    return app


app = create_app()
