"""
Read‑only access to the technician and service catalogs.

The catalogs are seed documents shipped in the data directory and are
returned exactly as stored.
"""

from typing import Any, Dict, List

from home_service_api.app.core import store


class CatalogService:

    @classmethod
    async def list_technicians(cls) -> List[Dict[str, Any]]:
        return store.load("technicians")

    @classmethod
    async def list_services(cls) -> Dict[str, Any]:
        """Return services grouped by category."""
        return store.load("services")
