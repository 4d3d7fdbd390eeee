"""Logging setup for the portal.

One root level plus a level per category, all taken from Settings:
uvicorn, the session/login flow, fixture loading and the navigation tracer.
Call ``setup_logging()`` once from the application lifespan.
"""

import logging
import sys

from warranty_portal.config import Settings, get_settings

# Settings field → loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_session": (
        "warranty_portal.application.services.login_service",
        "warranty_portal.infrastructure.session",
    ),
    "log_level_fixtures": ("warranty_portal.infrastructure.fixtures",),
    "log_level_navigation": ("NavigationLogger",),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # Under uvicorn a handler is usually already attached.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    levels = {}
    for field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field))
        levels[field.removeprefix("log_level_")] = logging.getLevelName(level)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, levels)


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
