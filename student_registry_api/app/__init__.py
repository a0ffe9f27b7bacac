"""
Application package initializer.

The registry is organised in layers: ``core`` (configuration, logging,
the in-memory store and outcome types), ``schemas`` (Pydantic models),
``services`` (validation and registration rules) and ``api`` (FastAPI
routes and the mapping of outcomes to HTTP responses).  Routes are
grouped by version under ``api/<version>/``.
"""

from .main import app  # noqa: F401
