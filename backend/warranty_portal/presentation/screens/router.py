"""Screen router — aggregates every screen endpoint router.

Public: role selection and login. Everything else is mounted behind the
route guard (see ``guard.protected_router``).
"""

from fastapi import APIRouter

from warranty_portal.presentation.screens.endpoints.role_selection import router as role_selection_router
from warranty_portal.presentation.screens.endpoints.login import router as login_router
from warranty_portal.presentation.screens.endpoints.login import logout_router
from warranty_portal.presentation.screens.endpoints.dashboard import router as dashboard_router
from warranty_portal.presentation.screens.endpoints.products import router as products_router
from warranty_portal.presentation.screens.endpoints.register_warranty import router as register_warranty_router
from warranty_portal.presentation.screens.endpoints.service_request import router as service_request_router
from warranty_portal.presentation.screens.endpoints.service_history import router as service_history_router
from warranty_portal.presentation.screens.endpoints.profile import router as profile_router

router = APIRouter()
router.include_router(role_selection_router)
router.include_router(login_router)
router.include_router(logout_router)
router.include_router(dashboard_router)
router.include_router(products_router)
router.include_router(register_warranty_router)
router.include_router(service_request_router)
router.include_router(service_history_router)
router.include_router(profile_router)
