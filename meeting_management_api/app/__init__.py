"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The meeting domain is split into schemas (request and
response models), services (the in‑memory meeting store and its
filters), core (configuration, logging and JSON persistence) and a
versioned ``api`` package exposing the HTTP routes.
"""

from .main import app  # noqa: F401
