"""Abstract session store interface (port) for role and login state."""

from abc import ABC, abstractmethod

from warranty_portal.domain.entities import Role, Session


class SessionStore(ABC):
    """Port for the client-held session — implemented in the infrastructure layer.

    Holds the selected role, the authentication flag and the user's mobile
    number, plus the mobile awaiting OTP verification.
    """

    @property
    @abstractmethod
    def role(self) -> Role:
        """Selected role; ``Role.CUSTOMER`` when none was chosen."""
        ...

    @property
    @abstractmethod
    def has_role(self) -> bool:
        """Whether a role was explicitly chosen."""
        ...

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        ...

    @property
    @abstractmethod
    def mobile(self) -> str:
        """Mobile number of the logged-in user, or an empty string."""
        ...

    @property
    @abstractmethod
    def pending_mobile(self) -> str | None:
        """Mobile number an OTP was sent to, while verification is outstanding."""
        ...

    @abstractmethod
    def set_role(self, role: Role) -> None:
        ...

    @abstractmethod
    def set_authenticated(self, authenticated: bool) -> None:
        ...

    @abstractmethod
    def set_mobile(self, mobile: str) -> None:
        ...

    @abstractmethod
    def set_pending_mobile(self, mobile: str | None) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        """Forget everything: role, authentication flag and mobile numbers."""
        ...

    def snapshot(self) -> Session:
        return Session(
            role=self.role,
            authenticated=self.is_authenticated,
            mobile=self.mobile,
            pending_mobile=self.pending_mobile,
        )
