"""Pydantic view models shared by every screen."""

from typing import Literal

from pydantic import BaseModel, Field


class Notification(BaseModel):
    """Transient toast shown by the client."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class ScreenResponse(BaseModel):
    """Base view model: which screen to render, what to announce, where to go next."""

    screen: str
    notification: Notification | None = None
    navigate_to: str | None = None
    navigate_delay_ms: int = 0


class FormErrorResponse(ScreenResponse):
    """Returned with 422 when a form is rejected; never navigates."""

    field_errors: dict[str, str] = Field(default_factory=dict)


class NotFoundResponse(ScreenResponse):
    screen: str = "not-found"
    path: str
    title: str = "404"
    message: str = "Oops! Page not found"
    home: str = "/"


class ProductOption(BaseModel):
    """Entry of a "Select Product" dropdown."""

    id: str
    name: str
