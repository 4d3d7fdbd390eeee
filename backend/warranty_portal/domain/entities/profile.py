"""Domain entity for the editable user profile."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    pincode: str

    def with_phone(self, phone: str) -> "UserProfile":
        return replace(self, phone=phone)
