from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = Field(default="Cart Offer", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    # sqlite:// = base en memoria (ofertas volátiles mientras viva el proceso)
    database_url: str = Field(default="sqlite://", alias="DATABASE_URL")
    segment_service_url: str = Field(default="http://localhost:1080", alias="SEGMENT_SERVICE_URL")
    segment_service_timeout: float = Field(default=2.0, alias="SEGMENT_SERVICE_TIMEOUT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    idempotency_ttl: int = Field(default=3600, alias="IDEMPOTENCY_TTL")

    class Config:
        env_file = ".env"


settings = Settings()
