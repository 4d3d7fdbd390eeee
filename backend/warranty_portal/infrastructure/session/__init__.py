from .cookie_session_store import CookieSessionStore

__all__ = ["CookieSessionStore"]
