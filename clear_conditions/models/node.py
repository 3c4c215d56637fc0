"""Data models for nodes and their status conditions."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ConditionKind(str, Enum):
    """Node condition types managed by this tool."""

    READY = "Ready"
    MEMORY_PRESSURE = "MemoryPressure"
    DISK_PRESSURE = "DiskPressure"
    PID_PRESSURE = "PIDPressure"


class ConditionStatus(str, Enum):
    """Tri-state condition status."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


RECOGNIZED_KINDS = frozenset(kind.value for kind in ConditionKind)


class NodeCondition(BaseModel):
    """A single entry of a node's ``status.conditions``."""

    type: str
    status: str
    last_heartbeat_time: datetime | None = None
    last_transition_time: datetime | None = None
    reason: str | None = None
    message: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate the condition type is not empty."""
        if not v:
            raise ValueError("condition type cannot be empty")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str, info: ValidationInfo) -> str:
        """Validate managed kinds use True, False or Unknown; other kinds pass through."""
        if info.data.get("type") not in RECOGNIZED_KINDS:
            return v
        allowed = [status.value for status in ConditionStatus]
        if v not in allowed:
            raise ValueError(f"status must be one of {allowed}, got '{v}'")
        return v

    @property
    def recognized(self) -> bool:
        """Whether this condition is one of the four managed kinds."""
        return self.type in RECOGNIZED_KINDS

    def to_kubernetes(self):
        """Convert to a ``V1NodeCondition`` for the API client."""
        from kubernetes.client import V1NodeCondition

        return V1NodeCondition(
            type=self.type,
            status=self.status,
            last_heartbeat_time=self.last_heartbeat_time,
            last_transition_time=self.last_transition_time,
            reason=self.reason,
            message=self.message,
        )

    @classmethod
    def from_kubernetes(cls, condition) -> "NodeCondition":
        """Parse from a ``V1NodeCondition``."""
        return cls(
            type=condition.type,
            status=condition.status,
            last_heartbeat_time=condition.last_heartbeat_time,
            last_transition_time=condition.last_transition_time,
            reason=condition.reason,
            message=condition.message,
        )


class Node(BaseModel):
    """Snapshot of a cluster node as fetched right before its update."""

    name: str
    conditions: list[NodeCondition] = Field(default_factory=list)
    # V1Node the snapshot was read from, sent back on update
    raw: Any = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_kubernetes(cls, node) -> "Node":
        """Parse from a ``V1Node``."""
        status = node.status
        conditions = (status.conditions if status else None) or []
        return cls(
            name=node.metadata.name,
            conditions=[NodeCondition.from_kubernetes(c) for c in conditions],
            raw=node,
        )

    def to_kubernetes(self):
        """Return the raw ``V1Node`` with this snapshot's conditions applied."""
        from kubernetes.client import V1Node, V1NodeStatus, V1ObjectMeta

        body = self.raw
        if body is None:
            body = V1Node(metadata=V1ObjectMeta(name=self.name))
        if body.status is None:
            body.status = V1NodeStatus()
        body.status.conditions = [c.to_kubernetes() for c in self.conditions]
        return body
