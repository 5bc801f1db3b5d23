"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Persons and their orders are exposed through routers
defined in ``api/v1/endpoints``; business logic lives in
``services`` and operates on the in‑memory store from ``core.store``.
"""

from .main import app  # noqa: F401
