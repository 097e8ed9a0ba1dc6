from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    API_BASE_URL: str = "http://localhost/glamora-bk/public/api"
    API_TOKEN: str | None = None
    API_TIMEOUT_SECONDS: float = 10.0

    TAX_RATE: float = 0.15
    RESERVATION_FEE: float = 300.0
    INCLUDE_BOOKING_ITEMS: bool = True

    EMAIL_ENDPOINT: str | None = None
    AUTH_TTL_SECONDS: float = 3600.0

    BUSINESS_NAME: str = "Glamora Studio"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
