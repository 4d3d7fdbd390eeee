"""Unit tests for the LoginService state machine."""

import pytest

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.services import LoginService
from warranty_portal.domain.entities import LoginStage, Role
from warranty_portal.domain.exceptions import FormValidationError, LoginStepError


class FakeSessionStore(SessionStore):
    """In-memory fake session store for unit testing."""

    def __init__(self):
        self._role: Role | None = None
        self._authenticated = False
        self._mobile = ""
        self._pending: str | None = None

    @property
    def role(self) -> Role:
        return self._role or Role.CUSTOMER

    @property
    def has_role(self) -> bool:
        return self._role is not None

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def mobile(self) -> str:
        return self._mobile

    @property
    def pending_mobile(self) -> str | None:
        return self._pending

    def set_role(self, role: Role) -> None:
        self._role = role

    def set_authenticated(self, authenticated: bool) -> None:
        self._authenticated = authenticated

    def set_mobile(self, mobile: str) -> None:
        self._mobile = mobile

    def set_pending_mobile(self, mobile: str | None) -> None:
        self._pending = mobile

    def clear(self) -> None:
        self._role = None
        self._authenticated = False
        self._mobile = ""
        self._pending = None


@pytest.fixture
def store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def service(store: FakeSessionStore) -> LoginService:
    return LoginService(store)


def test_starts_at_mobile_entry(service: LoginService):
    assert service.stage is LoginStage.MOBILE_ENTRY


def test_select_role(service: LoginService, store: FakeSessionStore):
    service.select_role(Role.DISTRIBUTOR)
    assert store.role is Role.DISTRIBUTOR


@pytest.mark.parametrize("mobile", [
    "", "987654321", "98765432101", "98765abcde", "+919876543",
    "٩٨٧٦٥٤٣٢١٠",  # Arabic-Indic digits
    "９８７６５４３２１０",  # full-width digits
])
def test_send_otp_rejects_anything_but_ten_digits(service: LoginService, mobile: str):
    with pytest.raises(FormValidationError) as exc_info:
        service.send_otp(mobile)
    assert exc_info.value.title == "Invalid mobile number"
    assert "mobile" in exc_info.value.field_errors
    assert service.stage is LoginStage.MOBILE_ENTRY


def test_send_otp_moves_to_otp_entry(service: LoginService, store: FakeSessionStore):
    service.send_otp("9876543210")
    assert service.stage is LoginStage.OTP_SENT
    assert store.pending_mobile == "9876543210"
    assert store.is_authenticated is False


def test_verify_before_send_is_out_of_order(service: LoginService):
    with pytest.raises(LoginStepError):
        service.verify_otp("123456")


@pytest.mark.parametrize("otp", ["", "12345", "1234567", "12a456", "١٢٣٤٥٦", "１２３４５６"])
def test_verify_rejects_anything_but_six_digits(service: LoginService, otp: str):
    service.send_otp("9876543210")
    with pytest.raises(FormValidationError) as exc_info:
        service.verify_otp(otp)
    assert exc_info.value.title == "Invalid OTP"
    assert service.stage is LoginStage.OTP_SENT


@pytest.mark.parametrize("otp", ["123456", "000000", "999999"])
def test_any_six_digits_authenticate(service: LoginService, store: FakeSessionStore, otp: str):
    service.send_otp("9876543210")
    service.verify_otp(otp)
    assert service.stage is LoginStage.AUTHENTICATED
    assert store.mobile == "9876543210"
    assert store.pending_mobile is None


def test_resend_returns_to_mobile_entry_keeping_number(service: LoginService):
    service.send_otp("9876543210")
    assert service.resend_otp() == "9876543210"
    assert service.stage is LoginStage.MOBILE_ENTRY


def test_logout_clears_session(service: LoginService, store: FakeSessionStore):
    service.select_role(Role.DISTRIBUTOR)
    service.send_otp("9876543210")
    service.verify_otp("123456")
    service.logout()
    assert store.is_authenticated is False
    assert store.has_role is False
    assert store.mobile == ""
