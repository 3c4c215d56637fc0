"""Compute and submit new condition sets for each node."""

from datetime import datetime, timezone

from clear_conditions.exceptions import ItemError
from clear_conditions.logging_config import get_logger
from clear_conditions.models.node import ConditionKind, ConditionStatus, Node, NodeCondition
from clear_conditions.models.run import RunReport
from clear_conditions.reporter import RunReporter

logger = get_logger(__name__)

# (kind, status, reason, message) in the order they are written to the node
DEFAULT_CONDITIONS = (
    (
        ConditionKind.MEMORY_PRESSURE,
        ConditionStatus.FALSE,
        "KubeletHasSufficientMemory",
        "kubelet has sufficient memory available",
    ),
    (
        ConditionKind.DISK_PRESSURE,
        ConditionStatus.FALSE,
        "KubeletHasNoDiskPressure",
        "kubelet has no disk pressure",
    ),
    (
        ConditionKind.PID_PRESSURE,
        ConditionStatus.FALSE,
        "KubeletHasSufficientPID",
        "kubelet has sufficient PID available",
    ),
    (
        ConditionKind.READY,
        ConditionStatus.TRUE,
        "KubeletReady",
        "kubelet is posting ready status",
    ),
)


def utcnow() -> datetime:
    """Current UTC time at the one-second precision the API server stores."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def build_default_conditions(now: datetime) -> list[NodeCondition]:
    """
    Build the four healthy conditions written by the overwrite policy.

    Every entry carries ``now`` as both heartbeat and transition time.
    """
    return [
        NodeCondition(
            type=kind.value,
            status=status.value,
            last_heartbeat_time=now,
            last_transition_time=now,
            reason=reason,
            message=message,
        )
        for kind, status, reason, message in DEFAULT_CONDITIONS
    ]


def prune_conditions(conditions: list[NodeCondition]) -> list[NodeCondition]:
    """Drop conditions of unrecognized kinds, keeping the rest untouched and in order."""
    return [c for c in conditions if c.recognized]


class ConditionReconciler:
    """
    Applies one policy to a sequence of nodes.

    Nodes are handled one at a time: fetch, compute, submit. A fetch failure
    propagates and ends the run. A rejected update is reported as ``Failed``
    and the loop continues with the next node.
    """

    def __init__(
        self,
        client,
        reporter: RunReporter,
        overwrite: bool = False,
        now: datetime | None = None,
    ):
        self.client = client
        self.reporter = reporter
        self.overwrite = overwrite
        # Shared by every node in the batch and never mutated
        self.defaults = build_default_conditions(now or utcnow()) if overwrite else []

    def reconcile(self, node: Node) -> Node:
        """Replace the node's conditions according to the active policy."""
        if self.overwrite:
            node.conditions = list(self.defaults)
        else:
            node.conditions = prune_conditions(node.conditions)
        return node

    def run(self, nodes) -> RunReport:
        """
        Process every node in order.

        Raises:
            FatalError: If a node cannot be fetched.
        """
        for name in nodes:
            logger.debug(f"Fetching node {name}")
            node = self.client.get_node(name)

            before = len(node.conditions)
            self.reconcile(node)
            logger.debug(
                f"Node {name}: {before} conditions -> {len(node.conditions)} "
                f"({'overwrite' if self.overwrite else 'prune'})"
            )

            try:
                self.client.update_node_status(node)
            except ItemError as e:
                logger.warning(f"Update failed for {e.node}: {e.format_message()}")
                self.reporter.failed(node.name, e.message)
                continue

            self.reporter.cleared(node.name)

        return self.reporter.report
