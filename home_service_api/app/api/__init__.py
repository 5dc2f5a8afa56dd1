"""
HTTP API package.

``router`` in ``router.py`` aggregates the domain routers from
``endpoints`` and is mounted under ``/api`` by the application.
"""
