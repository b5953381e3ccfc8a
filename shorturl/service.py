"""Business logic service for the short URL microservice."""

import logging
from typing import Optional, Union

from .store import LinkStore
from .resolver import HostResolver
from .models import ShortLink
from .exceptions import (
    HostResolutionError,
    LinkNotFoundError,
    MalformedURLError,
    UnresolvableHostError,
)
from .common.validators import is_valid_url, get_hostname, parse_link_id


class ShortURLService:
    """Validates submitted URLs, stores them, and resolves short identifiers."""

    def __init__(
        self,
        store: LinkStore,
        resolver: Optional[HostResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize short URL service.

        Args:
            store: Link store that owns the mappings
            resolver: Host resolver (anything with an async resolve(hostname))
            logger: Optional logger
        """
        self.store = store
        self.resolver = resolver or HostResolver()
        self.logger = logger or logging.getLogger(__name__)

    async def submit(self, raw_url: Optional[str]) -> ShortLink:
        """Validate a URL and assign it a short identifier.

        The URL must carry a scheme and a host, and the host must resolve.
        Nothing is stored, and no identifier is consumed, unless both hold.

        Args:
            raw_url: The URL as submitted by the client

        Returns:
            The new ShortLink, with the URL echoed verbatim

        Raises:
            MalformedURLError: If the URL has no scheme or host
            UnresolvableHostError: If the host does not resolve
        """
        is_valid, error = is_valid_url(raw_url)
        if not is_valid:
            self.logger.warning(f"Rejected URL {raw_url!r}: {error}")
            raise MalformedURLError(error)

        hostname = get_hostname(raw_url)
        try:
            await self.resolver.resolve(hostname)
        except HostResolutionError as e:
            self.logger.debug(str(e))
            self.logger.warning(f"Rejected URL {raw_url!r}: host {hostname!r} does not resolve")
            raise UnresolvableHostError(f"Host {hostname!r} does not resolve") from e

        link_id = self.store.put(raw_url)
        self.logger.info(f"Created short URL: {link_id} -> {raw_url}")

        return ShortLink(id=link_id, original_url=raw_url)

    def resolve(self, link_id: Union[int, str]) -> str:
        """Get the original URL for a short identifier.

        Args:
            link_id: The identifier, as an int or its decimal string form

        Returns:
            The original URL, to be used as a redirect target

        Raises:
            LinkNotFoundError: If the identifier was never issued
        """
        key = parse_link_id(link_id)
        if key is None:
            self.logger.info(f"Short URL not found: {link_id!r}")
            raise LinkNotFoundError(f"No link stored under {link_id!r}")

        try:
            original_url = self.store.get(key)
        except LinkNotFoundError:
            self.logger.info(f"Short URL not found: {link_id!r}")
            raise

        self.logger.debug(f"Resolved short URL: {key} -> {original_url}")
        return original_url

    def health_check(self) -> dict:
        """Report service health.

        Returns:
            Dictionary with overall status and number of stored links
        """
        return {
            "overall": True,
            "links": self.store.count(),
        }
