"""
Top‑level API router.

Aggregates the domain routers.  Paths are declared in full inside each
endpoint module because several domains share the ``/user`` prefix.
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, catalog, users

router = APIRouter()

router.include_router(catalog.router, tags=["catalog"])
router.include_router(auth.router, tags=["auth"])
router.include_router(bookings.router, tags=["bookings"])
router.include_router(users.router, tags=["users"])
