"""Data models for nodes, conditions and run state."""

from clear_conditions.models.node import (
    RECOGNIZED_KINDS,
    ConditionKind,
    ConditionStatus,
    Node,
    NodeCondition,
)
from clear_conditions.models.run import NodeOutcome, Outcome, RunPlan, RunReport

__all__ = [
    "RECOGNIZED_KINDS",
    "ConditionKind",
    "ConditionStatus",
    "Node",
    "NodeCondition",
    "NodeOutcome",
    "Outcome",
    "RunPlan",
    "RunReport",
]
