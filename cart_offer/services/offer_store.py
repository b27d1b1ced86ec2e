import logging
import threading
from typing import List

from sqlalchemy import delete, func, select

from ..db import Base, make_engine, make_session_factory
from ..models.offer import Offer, OfferRecord, storable

logger = logging.getLogger(__name__)


class OfferStore:
    """
    Multimapa append-only restaurant_id -> ofertas en orden de alta.

    Todas las operaciones toman el mismo lock y hacen commit antes de soltarlo:
    un lookup ve cada oferta completa o no la ve, y el sequence (id autoincrement)
    sigue el orden en que add() obtiene el lock.
    """

    def __init__(self, database_url: str = "sqlite://"):
        self.engine = make_engine(database_url)
        self._session = make_session_factory(self.engine)
        self._lock = threading.Lock()
        # Crea tablas faltantes
        Base.metadata.create_all(bind=self.engine)

    def add(self, offer: Offer) -> Offer:
        with self._lock:
            s = self._session()
            try:
                rec = OfferRecord(
                    restaurant_id=offer.restaurant_id,
                    offer_type=offer.offer_type.value,
                    value=offer.value,
                    segments=list(offer.segments),
                )
                s.add(rec)
                s.commit()
                stored = rec.to_offer()
            finally:
                s.close()
        logger.info(
            "offer stored restaurant_id=%s sequence=%s type=%s value=%s",
            stored.restaurant_id,
            stored.sequence,
            stored.offer_type.value,
            stored.value,
        )
        return stored

    def lookup(self, restaurant_id: int) -> List[Offer]:
        # fuera de rango no puede tener ofertas (y SQLite ni siquiera lo acepta como parámetro)
        if not storable(restaurant_id):
            return []
        with self._lock:
            s = self._session()
            try:
                rows = s.execute(
                    select(OfferRecord)
                    .where(OfferRecord.restaurant_id == restaurant_id)
                    .order_by(OfferRecord.id)
                ).scalars()
                return [r.to_offer() for r in rows]
            finally:
                s.close()

    def count(self) -> int:
        with self._lock:
            s = self._session()
            try:
                return int(s.execute(select(func.count(OfferRecord.id))).scalar() or 0)
            finally:
                s.close()

    def clear(self) -> None:
        with self._lock:
            s = self._session()
            try:
                s.execute(delete(OfferRecord))
                s.commit()
            finally:
                s.close()
        logger.info("offer store cleared")

    def dispose(self) -> None:
        self.engine.dispose()
