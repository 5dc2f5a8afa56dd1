"""
Catalog endpoints: technicians and services.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from home_service_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/technicians", response_model=List[Dict[str, Any]])
async def list_technicians() -> List[Dict[str, Any]]:
    """Return every technician in the catalog."""
    return await CatalogService.list_technicians()


@router.get("/services", response_model=Dict[str, Any])
async def list_services() -> Dict[str, Any]:
    """Return services grouped by category name."""
    return await CatalogService.list_services()
