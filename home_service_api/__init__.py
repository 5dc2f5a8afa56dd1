"""
Top‑level package for the Home Service Booking API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``home_service_api.app.main:app``.
"""

__all__ = []
