from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Scaling
    max_scale_factor: float = 8.0  # Upper bound accepted by the API (UI stepper tops out at 4x)
    default_servings: int = 4

    # Rate limit for full recipe exports
    export_rate_limit: str = "30/minute"

    # PDF export
    pdf_page_compression: bool = False  # Uncompressed streams keep exported text greppable

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5000",
    ]


settings = Settings()
