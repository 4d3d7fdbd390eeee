"""Liveness probe for the portal, with a summary of the loaded fixtures."""

from fastapi import APIRouter, Depends

from warranty_portal.config import Settings, get_settings
from warranty_portal.infrastructure.dependencies import get_fixture_catalog
from warranty_portal.infrastructure.fixtures import FixtureCatalog

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_settings),
    catalog: FixtureCatalog = Depends(get_fixture_catalog),
) -> dict:
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "fixtures": {
            "products": len(catalog.products),
            "service_records": len(catalog.service_history),
        },
    }
