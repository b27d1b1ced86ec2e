from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from sqlalchemy import JSON, Column, Integer, String

from ..db import Base

# Rango de INTEGER en SQLite (8 bytes con signo)
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def storable(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


class OfferType(str, Enum):
    FLAT_AMOUNT = "FLATX"
    FLAT_PERCENTAGE = "FLAT%"

    @classmethod
    def from_literal(cls, literal: str) -> Optional["OfferType"]:
        # match exacto, sensible a mayúsculas: "flatx" no es FLATX
        try:
            return cls(literal)
        except ValueError:
            return None


@dataclass(frozen=True)
class Offer:
    restaurant_id: int
    offer_type: OfferType
    value: int
    segments: Tuple[str, ...]
    sequence: Optional[int] = None  # lo asigna el store al insertar

    def matches(self, segment: Optional[str]) -> bool:
        return segment is not None and segment in self.segments


class OfferRecord(Base):
    __tablename__ = "offer"
    __table_args__ = {"sqlite_autoincrement": True}

    # id = sequence: AUTOINCREMENT nunca reutiliza valores, ni tras clear()
    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer, index=True, nullable=False)
    offer_type = Column(String, nullable=False)  # 'FLATX' | 'FLAT%'
    value = Column(Integer, nullable=False)
    segments = Column(JSON, nullable=False)

    def to_offer(self) -> Offer:
        return Offer(
            restaurant_id=self.restaurant_id,
            offer_type=OfferType(self.offer_type),
            value=self.value,
            segments=tuple(self.segments),
            sequence=self.id,
        )
