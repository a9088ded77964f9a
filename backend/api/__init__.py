"""
Kosync API package.

Provides the FastAPI application for the reading progress sync service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
