"""
Infrastructure Layer Package

Transport-bound implementations of the domain probe contracts: remote
endpoint probing over HTTP and the aggregation node that owns the
transport.
"""

from healthmesh.infrastructure import gateways, services

__all__ = ["gateways", "services"]
