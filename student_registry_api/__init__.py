"""
Top‑level package for the Student Registry API.

All functionality lives in submodules: the FastAPI application under
``app`` and a small HTTP client in ``client``.
"""

__all__ = []
