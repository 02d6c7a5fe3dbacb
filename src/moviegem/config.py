"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOVIEGEM_",
        case_sensitive=False,
        extra="ignore",
    )

    # SheetDB API
    sheetdb_api_endpoint: str = "https://sheetdb.io/api/v1/gwog7qdzdkusm"

    # The sheet name and query date format differ between call sites in the
    # upstream spreadsheet; whoever owns the endpoint should pin these.
    sheet_name: str = "MovieBookingData"
    date_filter_column: str = "場次日期"
    query_date_format: str = "%Y/%m/%d"

    # Request settings
    request_timeout: float = 10.0

    # Showtimes are interpreted in this timezone
    timezone: str = "Asia/Taipei"

    log_level: str = "INFO"


# Global settings instance
settings = Settings()
