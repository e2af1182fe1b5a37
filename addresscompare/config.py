from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    APP_TITLE: str = "Address Comparison Tool"
    LOG_LEVEL: str = "INFO"

    # --- HTTP server (scripts/run_api.py) ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # --- Request limits ---
    # Edit distance is O(n*m); keep inputs address-sized.
    MAX_ADDRESS_LENGTH: int = 500


settings = Settings()
