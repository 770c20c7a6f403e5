from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "SAPHIR"
    BUSINESS_TIMEZONE: str = "Africa/Abidjan"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_WINDOW_DAYS: int = 14
    CURRENCY_LABEL: str = "FCFA"

    WHATSAPP_NUMBER: str = "2250143250653"
    WHATSAPP_BASE_URL: str = "https://wa.me"

    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    SUPABASE_RPC_CREATE: str = "create_reservation_with_client"
    SUPABASE_TIMEOUT_SECONDS: float = 10.0

    WEBHOOK_SECRET: str | None = None


settings = Settings()
