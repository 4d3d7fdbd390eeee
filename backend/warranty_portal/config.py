import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Warranty Portal"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Client-held session (signed cookie)
    session_secret_key: str = "change-me-warranty-portal"
    session_cookie_name: str = "warranty_session"
    session_max_age: int = 14 * 24 * 60 * 60
    session_https_only: bool = False

    # Fixture data (relative to backend directory)
    fixtures_file: str = "data/fixtures.yaml"

    # Form screens
    form_redirect_delay_ms: int = 1500
    max_upload_size_mb: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_session: str = "INFO"          # login flow / session store
    log_level_fixtures: str = "INFO"         # fixture loading
    log_level_navigation: str = "INFO"       # NavigationLogger transitions

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def fixtures_path(self) -> Path:
        """Fixture file path; relative values resolve against the backend directory."""
        path = Path(self.fixtures_file)
        if not path.is_absolute():
            path = _BACKEND_DIR / path
        return path

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    def model_post_init(self, __context: object) -> None:
        if self.app_env == "production" and self.session_secret_key == "change-me-warranty-portal":
            _config_logger.warning(
                "SESSION_SECRET_KEY is still the development default; session cookies are forgeable."
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
