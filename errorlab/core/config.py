"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        environment: Deployment environment attached to telemetry events.
        host: Interface the server binds to.
        port: Port the server listens on.
        posthog_project_key: PostHog project key. Empty disables telemetry.
        posthog_host: PostHog ingestion host.
        posthog_flush_at: Queue size that triggers a background flush.
        posthog_flush_interval: Seconds between background flushes.
        max_slow_delay_ms: Upper bound for /api/slow.
        max_batch_events: Upper bound for /api/batch-events.
        max_batch_errors: Upper bound for /api/batch-errors.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for the batch endpoints.
        cors_allow_origins: Origins allowed by CORS.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "ErrorLab"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 5050

    posthog_project_key: str = ""
    posthog_host: str = "https://app.posthog.com"
    posthog_flush_at: int = 1
    posthog_flush_interval: float = 0.5

    max_slow_delay_ms: int = 10_000
    max_batch_events: int = 100
    max_batch_errors: int = 20

    rate_limit_default: str = "300/minute"
    rate_limit_heavy: str = "30/minute"
    cors_allow_origins: list[str] = ["*"]


settings = Settings()
