import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Tuple

from ..models.offer import Offer

logger = logging.getLogger(__name__)


class OfferCreationLedger:
    """
    Recuerda qué oferta registró cada Idempotency-Key durante `ttl` segundos.

    Un reintento con la misma clave devuelve la oferta ya guardada en vez de
    crear otra. Altas concurrentes con la misma clave se serializan con un lock
    por clave; el lock se descarta cuando ya nadie lo espera. Los fallos
    (validación) no se recuerdan: el siguiente intento se procesa de verdad.
    """

    def __init__(self, ttl: int = 3600, max_entries: int = 2048):
        self.ttl = ttl
        self.max_entries = max_entries
        self._created = OrderedDict()  # key -> (offer, exp)
        self._locks = {}  # key -> [lock, usuarios]
        self._guard = threading.Lock()

    def create_once(self, key: str, create: Callable[[], Offer]) -> Tuple[Offer, bool]:
        """Devuelve (oferta, replay)."""
        lock = self._acquire(key)
        try:
            with lock:
                offer = self._recall(key)
                if offer is not None:
                    logger.info("offer creation replayed key=%s sequence=%s", key, offer.sequence)
                    return offer, True
                offer = create()
                self._remember(key, offer)
                return offer, False
        finally:
            self._release(key)

    def in_flight(self) -> int:
        with self._guard:
            return len(self._locks)

    def __len__(self) -> int:
        with self._guard:
            return len(self._created)

    def _acquire(self, key):
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
            return entry[0]

    def _release(self, key):
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    def _recall(self, key):
        with self._guard:
            item = self._created.get(key)
            if item is None:
                return None
            offer, exp = item
            if exp < time.monotonic():
                del self._created[key]
                return None
            return offer

    def _remember(self, key, offer):
        with self._guard:
            self._created.pop(key, None)
            while len(self._created) >= self.max_entries:
                self._created.popitem(last=False)
            self._created[key] = (offer, time.monotonic() + self.ttl)
