"""Exception hierarchy for the short URL service."""


class ShortURLError(Exception):
    """Base exception for all application-specific errors."""


class InvalidURLError(ShortURLError):
    """Raised when a submitted URL is rejected."""


class MalformedURLError(InvalidURLError):
    """Raised when a submitted URL has no scheme or host, or cannot be parsed."""


class UnresolvableHostError(InvalidURLError):
    """Raised when the host of a submitted URL does not resolve."""


class LinkNotFoundError(ShortURLError):
    """Raised when no URL is stored under the requested short identifier."""


class HostResolutionError(ShortURLError):
    """Raised by the resolver when a host name lookup fails or times out."""
