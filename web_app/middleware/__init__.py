"""Middleware for the short URL web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
