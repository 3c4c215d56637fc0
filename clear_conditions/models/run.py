"""Data models for a single clear-conditions run."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunPlan(BaseModel):
    """Resolved targets and switches, fixed before any mutation."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[str, ...]
    overwrite: bool = False
    consent: bool = False
    context: str | None = None
    kubeconfig: str | None = None

    @field_validator("nodes")
    @classmethod
    def validate_nodes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate there is at least one target and no blank names."""
        if not v:
            raise ValueError("a run needs at least one node")
        if any(not name for name in v):
            raise ValueError("node names cannot be empty")
        return v

    @property
    def interactive(self) -> bool:
        """True when the operator was prompted for confirmation."""
        return not self.consent


class Outcome(str, Enum):
    """Terminal result of processing one node."""

    CLEARED = "Cleared"
    FAILED = "Failed"


class NodeOutcome(BaseModel):
    """Outcome recorded for one node."""

    node: str
    outcome: Outcome
    error: str | None = None

    def __str__(self) -> str:
        return f"{self.outcome.value}: {self.node}"


class RunReport(BaseModel):
    """Per-node outcomes in processing order."""

    outcomes: list[NodeOutcome] = Field(default_factory=list)

    def record(self, outcome: NodeOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def lines(self) -> list[str]:
        return [str(o) for o in self.outcomes]
