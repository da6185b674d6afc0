"""
healthmesh - Composable health-state aggregation node

A node reports its own availability together with the availability of
everything it depends on: in-process components and remote peer nodes
that expose the same ``/health`` query surface.

Layer Structure:
- Domain: Health entities, probe contracts and the fan-out/merge logic
- Application: Use cases and DTOs (wire shape of the health report)
- Infrastructure: Remote endpoint probing and the aggregation node
- Presentation: FastAPI controller exposing the query surface
- Shared: Cross-cutting concerns (constants, logging)
- Main: Composition root, application entry point and configuration
"""

__version__ = "0.1.0"
