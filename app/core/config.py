"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ZOOM_LEVELS = ("day", "week", "month", "quarter")
_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default; validate_ranges rejects inconsistent
    timeline and telemetry values.
    """

    # App
    app_name: str = "store-opening"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: str = "http://localhost:4200,http://localhost:3000"

    # Timeline rendering defaults
    timeline_row_height: float = 41.0
    timeline_edge_bias: float = 0.02
    default_timeline_zoom: str = "day"

    # Deadline classification: a task is "due soon" within this many days
    deadline_due_soon_days: int = 3

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """CORS origins as a list (comma-separated in the environment)."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate timeline and telemetry settings."""
        if self.timeline_row_height <= 0:
            raise ValueError("TIMELINE_ROW_HEIGHT must be positive.")
        if not 0 <= self.timeline_edge_bias < 1:
            raise ValueError("TIMELINE_EDGE_BIAS must be a fraction in [0, 1).")
        if self.default_timeline_zoom not in _ZOOM_LEVELS:
            raise ValueError(
                f"DEFAULT_TIMELINE_ZOOM must be one of {', '.join(_ZOOM_LEVELS)}, "
                f"got: {self.default_timeline_zoom!r}"
            )
        if self.deadline_due_soon_days < 0:
            raise ValueError("DEADLINE_DUE_SOON_DAYS must not be negative.")
        if self.telemetry_exporter not in _EXPORTERS:
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: {', '.join(_EXPORTERS)}"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("TELEMETRY_SAMPLE_RATE must be between 0.0 and 1.0.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
