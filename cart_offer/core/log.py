import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Un solo StreamHandler sobre el logger raíz del paquete; idempotente
    (create_app puede llamarse varias veces en los tests).
    """
    logger = logging.getLogger("cart_offer")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
