"""
Gateways Package - Infrastructure Layer

HTTP probes against the query surface of peer nodes.
"""

from .remote_endpoint import RemoteEndpoint

__all__ = ["RemoteEndpoint"]
