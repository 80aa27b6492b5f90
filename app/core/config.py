"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the identity header names.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_format: ``logging`` format string for every log line.
        log_date_format: ``strftime`` format of the log timestamp.
        host: Interface uvicorn binds to when run via ``python -m app``.
        port: Port uvicorn listens on.
        database_url: SQLAlchemy async URL of the bundle store.
        database_echo: Log every SQL statement (development only).
        identity_header: Request header carrying the authenticated
            principal name, set by the fronting auth proxy.
        identity_provider_header: Request header naming the identity
            provider of that principal.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "LinkyLink"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    host: str = "0.0.0.0"
    port: int = 8000

    database_url: str = "sqlite+aiosqlite:///./linkylink.db"
    database_echo: bool = False

    identity_header: str = "X-MS-CLIENT-PRINCIPAL-NAME"
    identity_provider_header: str = "X-MS-CLIENT-PRINCIPAL-IDP"

    max_request_size_bytes: int = 1_048_576  # 1 MB


settings = Settings()
