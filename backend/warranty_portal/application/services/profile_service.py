"""Application service for the Profile screen.

Edits are validated and acknowledged, then discarded; the next visit shows
the defaults again. The phone number always comes from the session.
"""

import re
from dataclasses import dataclass

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.domain.entities import UserProfile
from warranty_portal.domain.exceptions import FormValidationError, MissingInformationError
from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage

nlog = NavigationLogger()

SCREEN = "profile"

_PINCODE_PATTERN = re.compile(r"[0-9]{6}")

_REQUIRED_FIELDS = {
    "name": "Enter your full name",
    "email": "Enter your email address",
    "address": "Enter your street address",
    "city": "Enter your city",
    "state": "Enter your state",
    "pincode": "Enter your PIN code",
}


@dataclass(frozen=True)
class ProfileUpdate:
    name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""


class ProfileService:
    def __init__(self, store: SessionStore, defaults: UserProfile):
        self._store = store
        self._defaults = defaults

    def current_profile(self) -> UserProfile:
        return self._defaults.with_phone(self._store.mobile)

    def update_profile(self, update: ProfileUpdate) -> UserProfile:
        values = {name: getattr(update, name).strip() for name in _REQUIRED_FIELDS}

        missing = {name: message for name, message in _REQUIRED_FIELDS.items() if not values[name]}
        if missing:
            nlog.rejected(NavigationStage.FORM, "Missing Information", screen=SCREEN, fields=",".join(missing))
            raise MissingInformationError(SCREEN, missing)

        if not _PINCODE_PATTERN.fullmatch(values["pincode"]):
            raise FormValidationError(
                SCREEN,
                "Invalid PIN code",
                "Please enter a valid 6-digit PIN code",
                {"pincode": "Enter a 6-digit PIN code"},
            )
        if "@" not in values["email"]:
            raise FormValidationError(
                SCREEN,
                "Invalid email",
                "Please enter a valid email address",
                {"email": "Enter a valid email address"},
            )

        nlog.transition(NavigationStage.FORM, "Profile Updated")
        return UserProfile(phone=self._store.mobile, **values)
