"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from hypothesis import Verbosity, settings

from clear_conditions.exceptions import NodeFetchError, NodeUpdateError
from clear_conditions.models.node import Node, NodeCondition

# Configure Hypothesis for property-based testing
settings.register_profile("default", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=10, verbosity=Verbosity.verbose)

# Load the default profile
settings.load_profile("default")

EARLIER = datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)


class FakeClusterClient:
    """In-memory stand-in for ClusterClient that records every call."""

    def __init__(
        self,
        nodes: dict[str, list[NodeCondition]],
        fail_get: tuple[str, ...] = (),
        fail_update: tuple[str, ...] = (),
        context: str = "test-context",
    ):
        self.nodes = nodes
        self.fail_get = set(fail_get)
        self.fail_update = set(fail_update)
        self.context = context
        self.list_calls = 0
        self.get_calls: list[str] = []
        self.update_calls: list[str] = []

    def list_node_names(self) -> list[str]:
        self.list_calls += 1
        return list(self.nodes)

    def get_node(self, name: str) -> Node:
        self.get_calls.append(name)
        if name in self.fail_get or name not in self.nodes:
            raise NodeFetchError(name, f"Failed to get node '{name}'", "404 Not Found")
        return Node(name=name, conditions=[c.model_copy() for c in self.nodes[name]])

    def update_node_status(self, node: Node) -> None:
        self.update_calls.append(node.name)
        if node.name in self.fail_update:
            raise NodeUpdateError(node.name, f"Failed to update node '{node.name}'", "409 Conflict")
        self.nodes[node.name] = list(node.conditions)


def make_condition(kind: str, status: str = "False", reason: str | None = None) -> NodeCondition:
    """Build a condition stamped with a fixed past time."""
    return NodeCondition(
        type=kind,
        status=status,
        last_heartbeat_time=EARLIER,
        last_transition_time=EARLIER,
        reason=reason or f"{kind}Reason",
        message=f"{kind} reported {status}",
    )


@pytest.fixture
def n1_conditions():
    """Node with two recognized conditions and one custom condition."""
    return [
        make_condition("Ready", "True", "KubeletReady"),
        make_condition("DiskPressure", "True", "KubeletHasDiskPressure"),
        make_condition("CustomTaintCondition", "True", "X"),
    ]


@pytest.fixture
def fake_client(n1_conditions):
    """Factory for FakeClusterClient; defaults to a single node n1."""

    def _make(nodes=None, **kwargs):
        if nodes is None:
            nodes = {"n1": n1_conditions}
        return FakeClusterClient(nodes, **kwargs)

    return _make
