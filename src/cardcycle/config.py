from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    ledger_file: str = "data/ledger/sample_ledger.json"

    timezone: str = "UTC"
    log_level: str = "INFO"
    stats_cache_size: int = 32

    model_config = SettingsConfigDict(
        env_prefix="CARDCYCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
