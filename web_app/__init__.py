"""FastAPI web application for the short URL service."""

from .app_factory import create_app

__all__ = ["create_app"]
