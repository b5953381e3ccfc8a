"""In-memory link store for the short URL service."""

import logging
import threading
from typing import Dict, Optional

from .exceptions import LinkNotFoundError


class LinkStore:
    """Holds short identifier to URL mappings and issues fresh identifiers.

    Identifiers start at 1 and grow by one per successful ``put``. They are
    never reused. The store lives for as long as the process does.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize an empty store.

        Args:
            logger: Optional logger
        """
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[int, str] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def put(self, original_url: str) -> int:
        """Store a URL under the next identifier.

        Args:
            original_url: The URL to store, kept verbatim

        Returns:
            The newly assigned identifier
        """
        with self._lock:
            link_id = self._next_id
            self._next_id += 1
            self._links[link_id] = original_url

        self.logger.debug(f"Stored link {link_id} -> {original_url}")
        return link_id

    def get(self, link_id: int) -> str:
        """Get the URL stored under an identifier.

        Args:
            link_id: The identifier to look up

        Returns:
            The original URL

        Raises:
            LinkNotFoundError: If nothing is stored under link_id
        """
        try:
            return self._links[link_id]
        except KeyError:
            raise LinkNotFoundError(f"No link stored under {link_id!r}") from None

    def count(self) -> int:
        """Number of stored links."""
        return len(self._links)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, link_id) -> bool:
        return link_id in self._links
