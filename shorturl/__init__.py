"""Core business logic for the short URL microservice."""

from .store import LinkStore
from .resolver import HostResolver
from .models import ShortLink
from .service import ShortURLService

__all__ = ["LinkStore", "HostResolver", "ShortURLService", "ShortLink"]
