"""Common utilities for the short URL service."""

from .validators import is_valid_url, extract_hostname, get_hostname, parse_link_id
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "extract_hostname",
    "get_hostname",
    "parse_link_id",
    "setup_logging",
]
