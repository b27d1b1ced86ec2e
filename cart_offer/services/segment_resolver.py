import logging
from typing import Dict, Optional, Protocol

import requests

from ..core.errors import SegmentLookupError

logger = logging.getLogger(__name__)

SEGMENT_PATH = "/api/v1/user_segment"


class SegmentResolver(Protocol):
    def resolve(self, user_id: int) -> str:
        ...


class HttpSegmentResolver:
    """
    Cliente del servicio de segmentos:
    GET {base_url}/api/v1/user_segment?user_id=<id>  ->  {"segment": "p1"}
    Siempre con timeout; cualquier fallo se reporta como SegmentLookupError.
    """

    def __init__(self, base_url: str, timeout: float = 2.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def resolve(self, user_id: int) -> str:
        url = f"{self.base_url}{SEGMENT_PATH}"
        try:
            r = self.session.get(url, params={"user_id": user_id}, timeout=self.timeout)
            r.raise_for_status()
            js = r.json()
        except requests.Timeout as e:
            raise SegmentLookupError(f"segment service timed out for user {user_id}") from e
        except requests.RequestException as e:
            raise SegmentLookupError(f"segment service failed for user {user_id}: {e}") from e
        except ValueError as e:
            raise SegmentLookupError(f"segment service returned invalid JSON for user {user_id}") from e

        segment = js.get("segment") if isinstance(js, dict) else None
        if not isinstance(segment, str) or not segment:
            raise SegmentLookupError(f"segment service returned no segment for user {user_id}")
        return segment


class StaticSegmentResolver:
    """Mapa fijo user_id -> segmento; usuarios desconocidos fallan."""

    def __init__(self, segments: Dict[int, str]):
        self.segments = dict(segments)

    def resolve(self, user_id: int) -> str:
        try:
            return self.segments[user_id]
        except KeyError:
            raise SegmentLookupError(f"unknown user {user_id}") from None


def resolve_or_none(resolver: SegmentResolver, user_id: int) -> Optional[str]:
    # Fallo de resolución = "sin segmento": el checkout nunca se cae por esto
    try:
        return resolver.resolve(user_id)
    except SegmentLookupError as e:
        logger.warning("segment lookup failed user_id=%s: %s", user_id, e)
        return None
