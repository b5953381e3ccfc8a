"""Validation utilities for the short URL service."""

import re
from urllib.parse import urlsplit
from typing import Any, Optional, Tuple

# Canonical decimal spelling of a positive integer, as ids are rendered
_LINK_ID_PATTERN = re.compile(r"^[1-9][0-9]*$")

# Schemes whose host only ever follows "//"
_SLASHED_SCHEMES = {"http", "https", "ftp", "gopher", "file"}

# Schemes that never carry a host
_HOSTLESS_SCHEMES = {"javascript"}

# Opaque form, e.g. "mailto:someone@example.com" or "news:comp.lang"
_OPAQUE_AUTHORITY_END = re.compile(r"[/?#]")
_OPAQUE_HOST_END = re.compile(r"[/?#%;'{}|\\^`<>\"\s]")
_PORT_SUFFIX = re.compile(r":[0-9]*$")


def _opaque_hostname(scheme: str, rest: str) -> Optional[str]:
    """Find the host in a URL without "//", as in "mailto:user@host".

    Args:
        scheme: Lowercased scheme
        rest: Everything after "scheme:"

    Returns:
        Lowercased host name, or None if the scheme cannot carry one here
    """
    if scheme in _SLASHED_SCHEMES or scheme in _HOSTLESS_SCHEMES:
        return None

    # Userinfo ends at the last "@" before the path, query or fragment
    match = _OPAQUE_AUTHORITY_END.search(rest)
    authority_end = match.start() if match else len(rest)
    at = rest.rfind("@", 0, authority_end)
    if at != -1:
        rest = rest[at + 1:]

    match = _OPAQUE_HOST_END.search(rest)
    host = rest[:match.start()] if match else rest
    host = _PORT_SUFFIX.sub("", host)

    return host.lower() or None


def extract_hostname(url: str) -> Optional[str]:
    """Extract the host name of an absolute URL.

    Args:
        url: The URL to inspect

    Returns:
        Lowercased host name without brackets or port, or None

    Raises:
        ValueError: If the URL cannot be parsed
    """
    result = urlsplit(url)
    if result.netloc:
        return result.hostname
    if not result.scheme:
        return None
    return _opaque_hostname(result.scheme, url.split(":", 1)[1])


def is_valid_url(url: Any) -> Tuple[bool, str]:
    """Check that a URL is absolute, i.e. has both a scheme and a host.

    Any scheme is accepted. Whether the host actually exists is checked
    separately by the resolver.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    try:
        scheme = urlsplit(url).scheme
        hostname = extract_hostname(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if not scheme:
        return False, "URL must include a protocol"

    if not hostname:
        return False, "URL must include a host"

    return True, ""


def get_hostname(url: str) -> str:
    """Extract the host name of a URL already accepted by is_valid_url.

    Args:
        url: A valid absolute URL

    Returns:
        Lowercased host name without brackets or port
    """
    return extract_hostname(url)


def parse_link_id(value: Any) -> Optional[int]:
    """Convert a short identifier from its path form to the stored int form.

    Only the canonical decimal spelling of a positive integer can name an
    issued identifier; anything else returns None.

    Args:
        value: Identifier as received (str or int)

    Returns:
        The identifier as int, or None if it cannot name an issued link
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and _LINK_ID_PATTERN.match(value):
        return int(value)
    return None
