"""
Application package initializer.

The project is split into ``core`` (configuration, logging, storage and
password hashing), ``schemas`` (request/response models), ``services``
(business logic per domain) and ``api`` (HTTP routers).  Handlers stay
thin: they validate input, call a service and shape the response.
"""

from .main import app  # noqa: F401
