"""DTO for the nested health report exchanged between nodes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from healthmesh.domain.entities.health import HealthState, ServiceStatus


class HealthStateDTO(BaseModel):
    """Serializable representation of a health report.

    Peers built on the older capitalised wire shape (``Name`` /
    ``Dependencies``) are accepted on decode; output always uses the
    lower-case field names.
    """

    name: str = Field(
        validation_alias=AliasChoices("name", "Name"),
        description="Node or dependency name",
    )
    status: ServiceStatus = Field(
        default=ServiceStatus.UP,
        validation_alias=AliasChoices("status", "Status"),
        description="Availability of this node",
    )
    message: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("message", "Message"),
        description="Failure detail",
    )
    latency_ms: Optional[float] = Field(
        default=None, description="Time taken to probe this node, in milliseconds"
    )
    checked_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of the probe",
    )
    dependencies: List[HealthStateDTO] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dependencies", "Dependencies"),
        description="Reports of every dependency of this node",
    )

    @classmethod
    def from_domain(cls, state: HealthState) -> "HealthStateDTO":
        return cls(
            name=state.name,
            status=state.status,
            message=state.message,
            latency_ms=state.latency_ms,
            checked_at=state.checked_at,
            dependencies=[cls.from_domain(dep) for dep in state.dependencies],
        )

    def to_domain(self) -> HealthState:
        return HealthState(
            name=self.name,
            status=self.status,
            message=self.message,
            latency_ms=self.latency_ms,
            checked_at=self.checked_at,
            dependencies=[dep.to_domain() for dep in self.dependencies],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "orders-api",
                "status": "degraded",
                "message": None,
                "latency_ms": 41.7,
                "checked_at": "2024-09-09T12:00:00Z",
                "dependencies": [
                    {
                        "name": "db",
                        "status": "up",
                        "message": None,
                        "latency_ms": 3.2,
                        "checked_at": "2024-09-09T12:00:00Z",
                        "dependencies": [],
                    },
                    {
                        "name": "http://billing:8000/health",
                        "status": "down",
                        "message": "HTTP request failed: connection refused",
                        "latency_ms": 12.5,
                        "checked_at": "2024-09-09T12:00:00Z",
                        "dependencies": [],
                    },
                ],
            }
        }
    }


HealthStateDTO.model_rebuild()
