"""Route guard — protected screens share a router carrying the session check.

Anything mounted on ``protected_router`` answers ``303 See Other → /login``
when the session is not authenticated.

FastAPI parses and validates the request body before it runs router
dependencies, so a malformed body never reaches the guard. The
request-validation handler asks ``is_guarded`` to keep the redirect in that
case.
"""

from fastapi import APIRouter, Depends, Request

from warranty_portal.infrastructure.dependencies import require_authenticated_session


def protected_router(**kwargs) -> APIRouter:
    dependencies = list(kwargs.pop("dependencies", []))
    dependencies.append(Depends(require_authenticated_session))
    return APIRouter(dependencies=dependencies, **kwargs)


def is_guarded(request: Request) -> bool:
    """Whether the matched route was mounted on a ``protected_router``."""
    route = request.scope.get("route")
    return any(
        dep.dependency is require_authenticated_session
        for dep in getattr(route, "dependencies", ())
    )
