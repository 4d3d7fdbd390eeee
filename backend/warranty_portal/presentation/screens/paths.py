"""URL paths of every screen — the single source for navigation targets."""

ROLE_SELECTION = "/"
LOGIN = "/login"
DASHBOARD = "/dashboard"
REGISTER_WARRANTY = "/register-warranty"
SERVICE_REQUEST = "/service-request"
SERVICE_HISTORY = "/service-history"
PROFILE = "/profile"


def product_detail(product_id: str) -> str:
    return f"/product/{product_id}"


_SCREENS_BY_SEGMENT = {
    "": "role-selection",
    "login": "login",
    "logout": "login",
    "dashboard": "dashboard",
    "product": "product-detail",
    "register-warranty": "register-warranty",
    "service-request": "service-request",
    "service-history": "service-history",
    "profile": "profile",
}


def screen_for(path: str) -> str:
    """Screen name owning a URL path, e.g. ``/product/1`` → ``product-detail``."""
    segment = path.strip("/").split("/", 1)[0]
    return _SCREENS_BY_SEGMENT.get(segment, segment)
