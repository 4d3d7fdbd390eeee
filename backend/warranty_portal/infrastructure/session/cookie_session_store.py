"""Session store backed by Starlette's signed cookie session (``request.session``).

Values are kept as plain strings under fixed keys so the cookie payload stays
flat and readable.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.domain.entities import Role

logger = logging.getLogger(__name__)

ROLE_KEY = "user_role"
AUTHENTICATED_KEY = "is_authenticated"
MOBILE_KEY = "user_mobile"
PENDING_MOBILE_KEY = "pending_mobile"


class CookieSessionStore(SessionStore):
    """Infrastructure adapter mapping the SessionStore port onto a session dict."""

    def __init__(self, session: MutableMapping[str, Any]):
        self._session = session

    @property
    def role(self) -> Role:
        raw = self._session.get(ROLE_KEY)
        try:
            return Role(raw) if raw else Role.CUSTOMER
        except ValueError:
            logger.warning("Ignoring unknown role %r in session", raw)
            return Role.CUSTOMER

    @property
    def has_role(self) -> bool:
        return ROLE_KEY in self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session.get(AUTHENTICATED_KEY) == "true"

    @property
    def mobile(self) -> str:
        return self._session.get(MOBILE_KEY, "")

    @property
    def pending_mobile(self) -> str | None:
        return self._session.get(PENDING_MOBILE_KEY) or None

    def set_role(self, role: Role) -> None:
        self._session[ROLE_KEY] = role.value

    def set_authenticated(self, authenticated: bool) -> None:
        if authenticated:
            self._session[AUTHENTICATED_KEY] = "true"
        else:
            self._session.pop(AUTHENTICATED_KEY, None)

    def set_mobile(self, mobile: str) -> None:
        self._session[MOBILE_KEY] = mobile

    def set_pending_mobile(self, mobile: str | None) -> None:
        if mobile:
            self._session[PENDING_MOBILE_KEY] = mobile
        else:
            self._session.pop(PENDING_MOBILE_KEY, None)

    def clear(self) -> None:
        self._session.clear()
