"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class FormValidationError(Exception):
    """Raised when a submitted form fails client-facing validation.

    Carries the notification shown to the user plus per-field messages.
    """

    def __init__(
        self,
        screen: str,
        title: str,
        description: str,
        field_errors: dict[str, str] | None = None,
    ):
        self.screen = screen
        self.title = title
        self.description = description
        self.field_errors = field_errors or {}
        super().__init__(f"[{screen}] {title}: {description}")


class MissingInformationError(FormValidationError):
    """A required form field was left empty."""

    def __init__(self, screen: str, field_errors: dict[str, str]):
        super().__init__(
            screen,
            "Missing Information",
            "Please fill in all required fields",
            field_errors,
        )


class LoginStepError(Exception):
    """Raised when a login action is attempted out of order (e.g. verify before send)."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        self.message = message
        super().__init__(f"Login stage '{stage}': {message}")


class PermissionDeniedError(Exception):
    """Raised when the session role may not perform an action."""

    def __init__(self, role: str, action: str):
        self.role = role
        self.action = action
        super().__init__(f"Role '{role}' may not {action}")


class AuthenticationRequiredError(Exception):
    """Raised by the route guard when a protected path is requested without a login."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Authentication required for '{path}'")


class FixtureLoadError(Exception):
    """Raised when the fixture file is missing or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load fixtures from '{path}': {reason}")
