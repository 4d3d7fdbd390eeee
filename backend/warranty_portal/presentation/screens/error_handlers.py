"""Exception handlers translating domain errors into screen responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from warranty_portal.application.schemas import (
    FormErrorResponse,
    NotFoundResponse,
    Notification,
    ScreenResponse,
)
from warranty_portal.domain.exceptions import (
    AuthenticationRequiredError,
    FormValidationError,
    LoginStepError,
    PermissionDeniedError,
)
from warranty_portal.infrastructure.dependencies import get_session_store
from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import is_guarded

logger = logging.getLogger(__name__)
nlog = NavigationLogger()


def _redirect_to_login() -> RedirectResponse:
    return RedirectResponse(paths.LOGIN, status_code=status.HTTP_303_SEE_OTHER)


def _guard_applies(request: Request) -> bool:
    """Protected route hit without a login, before the guard dependency ran."""
    if not is_guarded(request) or get_session_store(request).is_authenticated:
        return False
    nlog.rejected(NavigationStage.GUARD, "Redirecting to /login", path=request.url.path)
    return True


def _form_error(screen: str, title: str, description: str, field_errors: dict[str, str]) -> JSONResponse:
    view = FormErrorResponse(
        screen=screen,
        notification=Notification(title=title, description=description, variant="destructive"),
        field_errors=field_errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=view.model_dump(mode="json"),
    )


async def _not_found_or_default(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        view = NotFoundResponse(path=request.url.path)
        return JSONResponse(status_code=exc.status_code, content=view.model_dump(mode="json"))
    # e.g. an unparseable multipart body on a protected form
    if exc.status_code == status.HTTP_400_BAD_REQUEST and _guard_applies(request):
        return _redirect_to_login()
    return await http_exception_handler(request, exc)


async def _request_shape_invalid(request: Request, exc: RequestValidationError):
    if _guard_applies(request):
        return _redirect_to_login()

    field_errors: dict[str, str] = {}
    for error in exc.errors():
        # loc[0] is the source (body, query, path); integers are list or JSON offsets
        names = [str(part) for part in error.get("loc", ())[1:] if isinstance(part, str)]
        field_errors.setdefault(".".join(names) or "body", error.get("msg", "Invalid value"))

    logger.info("Rejected %s %s: %s", request.method, request.url.path, ", ".join(field_errors))
    return _form_error(
        paths.screen_for(request.url.path),
        "Invalid request",
        "Please check the highlighted fields",
        field_errors,
    )


async def _authentication_required(request: Request, exc: AuthenticationRequiredError):
    return _redirect_to_login()


async def _form_validation_failed(request: Request, exc: FormValidationError):
    return _form_error(exc.screen, exc.title, exc.description, exc.field_errors)


async def _login_step_out_of_order(request: Request, exc: LoginStepError):
    view = ScreenResponse(
        screen="login",
        notification=Notification(title="OTP not requested", description=exc.message, variant="destructive"),
    )
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=view.model_dump(mode="json"))


async def _permission_denied(request: Request, exc: PermissionDeniedError):
    logger.info("Denied %s %s: %s", request.method, request.url.path, exc)
    view = ScreenResponse(
        screen="product-detail",
        notification=Notification(
            title="Not allowed",
            description="Only distributors can update customer details",
            variant="destructive",
        ),
    )
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=view.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _not_found_or_default)
    app.add_exception_handler(RequestValidationError, _request_shape_invalid)
    app.add_exception_handler(AuthenticationRequiredError, _authentication_required)
    app.add_exception_handler(FormValidationError, _form_validation_failed)
    app.add_exception_handler(LoginStepError, _login_step_out_of_order)
    app.add_exception_handler(PermissionDeniedError, _permission_denied)
