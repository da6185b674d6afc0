"""Domain ports package."""

from .health_probe import IHealthNode, IHttpDoer, IProbeTarget

__all__ = ["IHealthNode", "IHttpDoer", "IProbeTarget"]
