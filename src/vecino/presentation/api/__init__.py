"""REST API presentation layer for Vecino.

This package provides a FastAPI-based REST API for the marketplace.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection and auth gates
    ├── exception_handlers.py # Error envelope
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from vecino.presentation.api.app import create_app

__all__ = ["create_app"]
