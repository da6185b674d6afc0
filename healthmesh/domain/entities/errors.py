"""
Domain Errors

Only construction-time misuse surfaces as an exception; probe failures are
folded into the health report instead.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RequestConstructionError(DomainError):
    """Raised when an endpoint URL cannot be turned into a request."""

    def __init__(self, url: str, reason: str, details: Optional[Dict[str, Any]] = None):
        self.url = url
        self.reason = reason
        message = f"Cannot build health request for {url!r}: {reason}"
        super().__init__(message, {"url": url, **(details or {})})
