from pydantic import BaseModel, Field
from typing import List


class OfferIn(BaseModel):
    restaurant_id: int
    # str libre a propósito: el tipo lo valida OfferValidator (400, no 422)
    offer_type: str
    offer_value: int
    segments: List[str] = Field(default_factory=list)


class OfferCreated(BaseModel):
    response_msg: str = "success"


class OfferOut(BaseModel):
    sequence: int
    offer_type: str
    offer_value: int
    segments: List[str]


class RestaurantOffers(BaseModel):
    restaurant_id: int
    offers: List[OfferOut] = Field(default_factory=list)


class ApplyOfferIn(BaseModel):
    cart_value: int
    restaurant_id: int
    user_id: int


class ApplyOfferOut(BaseModel):
    cart_value: int
