"""
Endpoint modules.

Each module defines an APIRouter for one domain (catalog, auth,
bookings, users).  The routers are aggregated in ``api/router.py``.
"""
