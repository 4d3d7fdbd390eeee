"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends, Request

from warranty_portal.config import get_settings
from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.services import (
    LoginService,
    PhotoPreviewService,
    ProductService,
    ProfileService,
    ServiceHistoryService,
    ServiceRequestService,
    WarrantyRegistrationService,
)
from warranty_portal.domain.exceptions import AuthenticationRequiredError
from warranty_portal.infrastructure.fixtures import (
    FixtureCatalog,
    InMemoryProductRepository,
    InMemoryServiceRecordRepository,
    YamlFixtureLoader,
)
from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage
from warranty_portal.infrastructure.session import CookieSessionStore

nlog = NavigationLogger()


@lru_cache
def get_fixture_catalog() -> FixtureCatalog:
    """Fixture data, loaded once per process."""
    settings = get_settings()
    return YamlFixtureLoader(settings.fixtures_path).load()


def get_session_store(request: Request) -> SessionStore:
    """Session store bound to the request's signed cookie session."""
    return CookieSessionStore(request.session)


def require_authenticated_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> SessionStore:
    """Route guard — lets the request through only for an authenticated session."""
    if not store.is_authenticated:
        nlog.rejected(NavigationStage.GUARD, "Redirecting to /login", path=request.url.path)
        raise AuthenticationRequiredError(request.url.path)
    return store


def get_login_service(store: SessionStore = Depends(get_session_store)) -> LoginService:
    return LoginService(store)


def get_product_service(
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
) -> ProductService:
    """Provides a ProductService over the fixture products."""
    return ProductService(InMemoryProductRepository(catalog.products))


def get_service_history_service(
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
) -> ServiceHistoryService:
    return ServiceHistoryService(InMemoryServiceRecordRepository(catalog.service_history))


def get_warranty_registration_service(
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
) -> WarrantyRegistrationService:
    return WarrantyRegistrationService(InMemoryProductRepository(catalog.products))


def get_photo_preview_service() -> PhotoPreviewService:
    return PhotoPreviewService(max_size_bytes=get_settings().max_upload_size_bytes)


def get_service_request_service(
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
    photo_service: PhotoPreviewService = Depends(get_photo_preview_service),
) -> ServiceRequestService:
    """Provides a ServiceRequestService with product lookup and photo previews wired up."""
    return ServiceRequestService(InMemoryProductRepository(catalog.products), photo_service)


def get_profile_service(
    store: SessionStore = Depends(get_session_store),
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
) -> ProfileService:
    return ProfileService(store, catalog.profile)
