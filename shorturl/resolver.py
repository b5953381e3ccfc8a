"""Host name resolution for submitted URLs."""

import asyncio
import logging
import socket
from typing import List, Optional

from .exceptions import HostResolutionError


class HostResolver:
    """Resolves host names through the event loop's non-blocking getaddrinfo."""

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize resolver.

        Args:
            timeout_seconds: Upper bound for a single lookup
            logger: Optional logger
        """
        self.timeout_seconds = timeout_seconds
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, hostname: str) -> List[str]:
        """Resolve a host name to its addresses.

        Args:
            hostname: Host name or IP literal

        Returns:
            Resolved addresses, deduplicated, in resolver order

        Raises:
            HostResolutionError: If the lookup fails, times out or returns nothing
        """
        loop = asyncio.get_running_loop()

        try:
            infos = await asyncio.wait_for(
                loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise HostResolutionError(
                f"Lookup of {hostname!r} timed out after {self.timeout_seconds}s"
            ) from None
        except (OSError, ValueError) as e:
            # socket.gaierror is an OSError; IDNA failures and embedded NULs are ValueErrors
            raise HostResolutionError(f"Lookup of {hostname!r} failed: {e}") from e

        addresses = []
        for _family, _type, _proto, _canonname, sockaddr in infos:
            address = sockaddr[0]
            if address not in addresses:
                addresses.append(address)

        if not addresses:
            raise HostResolutionError(f"Lookup of {hostname!r} returned no addresses")

        self.logger.debug(f"Resolved {hostname} -> {addresses}")
        return addresses
