"""HTTP middleware tracing every screen request through the NavigationLogger."""

from fastapi import Request

from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage

nlog = NavigationLogger()


async def log_requests(request: Request, call_next):
    with nlog.timed_request(request.method, request.url.path) as outcome:
        response = await call_next(request)
        outcome["status"] = response.status_code
    location = response.headers.get("location")
    if location:
        nlog.transition(NavigationStage.NAVIGATE, f"{request.url.path} → {location}", status=response.status_code)
    return response
