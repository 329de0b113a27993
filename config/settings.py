from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Analysis backend (serves /api/wallet-scan, /api/collection-check, /api/nft-analyzer)
    analyzer_api_url: str = "http://localhost:3000"
    analyzer_timeout_sec: float | None = None  # None = wait until the network stack gives up

    # Web UI
    dashboard_host: str = "0.0.0.0"
    dashboard_port: int = 8080
    dashboard_debug: bool = False  # exposes /api/docs
    analyze_rate_limit: str = "30/minute"  # slowapi limit string for form submits

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
