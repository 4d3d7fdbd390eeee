"""Unit tests for the cookie-backed SessionStore adapter."""

from warranty_portal.domain.entities import LoginStage, Role
from warranty_portal.infrastructure.session import CookieSessionStore


def test_defaults_for_an_empty_session():
    store = CookieSessionStore({})
    assert store.role is Role.CUSTOMER
    assert store.has_role is False
    assert store.is_authenticated is False
    assert store.mobile == ""
    assert store.pending_mobile is None
    assert store.snapshot().login_stage is LoginStage.MOBILE_ENTRY


def test_values_are_stored_as_strings():
    raw: dict = {}
    store = CookieSessionStore(raw)
    store.set_role(Role.DISTRIBUTOR)
    store.set_authenticated(True)
    store.set_mobile("9876543210")

    assert raw == {
        "user_role": "distributor",
        "is_authenticated": "true",
        "user_mobile": "9876543210",
    }
    assert store.role is Role.DISTRIBUTOR
    assert store.snapshot().login_stage is LoginStage.AUTHENTICATED


def test_unauthenticating_removes_the_flag():
    raw = {"is_authenticated": "true"}
    store = CookieSessionStore(raw)
    store.set_authenticated(False)
    assert "is_authenticated" not in raw
    assert store.is_authenticated is False


def test_forged_flag_value_is_not_authenticated():
    store = CookieSessionStore({"is_authenticated": "yes"})
    assert store.is_authenticated is False


def test_unknown_role_falls_back_to_customer():
    store = CookieSessionStore({"user_role": "admin"})
    assert store.role is Role.CUSTOMER


def test_pending_mobile_drives_otp_stage():
    store = CookieSessionStore({})
    store.set_pending_mobile("9876543210")
    assert store.snapshot().login_stage is LoginStage.OTP_SENT
    store.set_pending_mobile(None)
    assert store.pending_mobile is None


def test_clear_forgets_everything():
    raw = {"user_role": "distributor", "is_authenticated": "true", "user_mobile": "9876543210"}
    store = CookieSessionStore(raw)
    store.clear()
    assert raw == {}
