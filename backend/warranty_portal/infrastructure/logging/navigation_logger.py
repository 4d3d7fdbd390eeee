"""Colored navigation logger — ANSI-colored console tracing of screen transitions.

Provides a NavigationLogger with color-coded output per transition kind,
making it easy to follow a user's path through the screens in the terminal.

Color scheme:
    🟢 Green   — Role selection / successful navigation
    🔵 Blue    — Login flow
    🟡 Yellow  — Route guard redirects
    🟣 Magenta — Form submissions
    🔴 Red     — Rejections / errors
    ⚪ Gray    — Timing and key=value context
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Transition kinds ─────────────────────────────────────────────────

class NavigationStage:
    """Predefined transition kinds with colors and icons."""

    ROLE = ("ROLE", _Colors.GREEN, "👤")
    LOGIN = ("LOGIN", _Colors.BLUE, "🔐")
    GUARD = ("GUARD", _Colors.YELLOW, "🚧")
    FORM = ("FORM", _Colors.MAGENTA, "📝")
    NAVIGATE = ("NAVIGATE", _Colors.GREEN, "➡️")
    REQUEST = ("REQUEST", _Colors.CYAN, "🌐")
    ERROR = ("ERROR", _Colors.RED, "❌")


def mask_mobile(mobile: str | None) -> str:
    """Mask a mobile number for logs, keeping only the last four digits."""
    if not mobile:
        return "-"
    if len(mobile) <= 4:
        return "*" * len(mobile)
    return "*" * (len(mobile) - 4) + mobile[-4:]


def _details(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── NavigationLogger ─────────────────────────────────────────────────

class NavigationLogger:
    """Color-coded logger for screen transitions.

    Usage:
        log = NavigationLogger()
        log.transition(NavigationStage.LOGIN, "OTP sent", mobile=mask_mobile(m))
        log.rejected(NavigationStage.FORM, "Missing Information", screen="register-warranty")
    """

    def __init__(self, component_name: str = "NavigationLogger"):
        self._logger = logging.getLogger(component_name)

    def transition(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log an accepted transition with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def rejected(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a rejected user action (validation failure, guard redirect) in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}✗ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_details(kwargs)}){_Colors.RESET}"
        self._logger.warning(formatted)

    @contextmanager
    def timed_request(self, method: str, path: str):
        """Context manager that logs a request's start/end with elapsed time.

        Yields a dict the caller fills with ``status`` once the response is known.
        """
        label, color, icon = NavigationStage.REQUEST
        outcome: dict[str, Any] = {}
        self._logger.debug(f"{color}{icon} [{label}]{_Colors.RESET} {method} {path}")
        start = time.perf_counter()
        try:
            yield outcome
        except Exception as e:
            elapsed = time.perf_counter() - start
            err_label, _, err_icon = NavigationStage.ERROR
            self._logger.error(
                f"{_Colors.RED}{_Colors.BOLD}{err_icon} [{err_label}]{_Colors.RESET} "
                f"{_Colors.RED}{method} {path} — failed after {elapsed:.3f}s{_Colors.RESET} "
                f"{_Colors.DIM}→ {type(e).__name__}: {e}{_Colors.RESET}"
            )
            raise
        else:
            elapsed = time.perf_counter() - start
            self._logger.info(
                f"{color}{icon} [{label}]{_Colors.RESET} {method} {path} "
                f"{_Colors.GRAY}→ {outcome.get('status', '?')} in {elapsed:.3f}s{_Colors.RESET}"
            )
