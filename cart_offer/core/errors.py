"""
Excepciones del dominio de ofertas.
"""


class CartOfferError(Exception):
    """Base de errores del servicio"""


class OfferValidationError(CartOfferError):
    """La solicitud de alta de oferta no cumple alguna regla"""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def as_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class SegmentLookupError(CartOfferError):
    """No se pudo obtener el segmento del usuario (no existe, caído, timeout)"""
