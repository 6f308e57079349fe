"""Configuration and environment settings for the finview client."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the finview client."""

    api_base_url: str = "http://localhost:3333"
    transactions_path: str = "/transactions"
    import_path: str = "/transactions/import"
    upload_field_name: str = "file"
    request_timeout: float = 10.0
    currency_symbol: str = "R$"
    decimal_separator: str = ","
    thousands_separator: str = "."
    date_format: str = "%d/%m/%Y"
    display_timezone: str = "UTC"
    success_route: str = "/dashboard"
    log_file: str | None = None
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
