"""Property-based tests for the prune and overwrite policies.

Feature: clear-conditions, Property 1: Prune keeps only recognized conditions
Feature: clear-conditions, Property 2: Overwrite converges to the healthy state
"""

import io
from datetime import datetime, timezone

from hypothesis import given
from hypothesis import strategies as st
from rich.console import Console

from clear_conditions.models.node import RECOGNIZED_KINDS, Node, NodeCondition
from clear_conditions.reconciler import (
    ConditionReconciler,
    build_default_conditions,
    prune_conditions,
)
from clear_conditions.reporter import RunReporter

HEALTHY = {
    "Ready": "True",
    "MemoryPressure": "False",
    "DiskPressure": "False",
    "PIDPressure": "False",
}

custom_kind = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", min_size=1, max_size=20
).filter(lambda kind: kind not in RECOGNIZED_KINDS)

timestamps = st.datetimes(
    min_value=datetime(2015, 1, 1), max_value=datetime(2035, 1, 1), timezones=st.just(timezone.utc)
)


@st.composite
def node_condition(draw, kinds=None):
    """Generate a condition of a recognized or custom kind."""
    kind = draw(kinds or st.one_of(st.sampled_from(sorted(RECOGNIZED_KINDS)), custom_kind))
    return NodeCondition(
        type=kind,
        status=draw(st.sampled_from(["True", "False", "Unknown"])),
        last_heartbeat_time=draw(st.none() | timestamps),
        last_transition_time=draw(st.none() | timestamps),
        reason=draw(st.none() | st.text(max_size=30)),
        message=draw(st.none() | st.text(max_size=60)),
    )


@st.composite
def condition_list(draw):
    """Generate a node condition list with at most one entry per recognized kind."""
    conditions = draw(st.lists(node_condition(), max_size=12))
    seen = set()
    result = []
    for condition in conditions:
        if condition.recognized:
            if condition.type in seen:
                continue
            seen.add(condition.type)
        result.append(condition)
    return result


def reconciler(overwrite: bool, now: datetime | None = None) -> ConditionReconciler:
    reporter = RunReporter(Console(file=io.StringIO()))
    return ConditionReconciler(None, reporter, overwrite=overwrite, now=now)


@given(conditions=condition_list())
def test_property_1_prune_keeps_recognized_in_order(conditions):
    """
    Feature: clear-conditions, Property 1: Prune keeps only recognized conditions

    For any condition list, pruning yields the recognized entries of the input,
    in their original order and with every field unchanged.
    """
    pruned = prune_conditions(conditions)

    assert pruned == [c for c in conditions if c.type in RECOGNIZED_KINDS]
    assert all(c.recognized for c in pruned)
    assert len({c.type for c in pruned}) == len(pruned)

    # subsequence of the original, field for field
    remaining = iter(conditions)
    assert all(any(c == original for original in remaining) for c in pruned)


@given(conditions=condition_list())
def test_property_1_prune_is_idempotent(conditions):
    once = prune_conditions(conditions)
    assert prune_conditions(once) == once


@given(conditions=condition_list())
def test_property_1_prune_never_adds(conditions):
    original_kinds = {c.type for c in conditions}
    assert {c.type for c in prune_conditions(conditions)} <= original_kinds


@given(conditions=condition_list(), now=timestamps)
def test_property_2_overwrite_converges(conditions, now):
    """
    Feature: clear-conditions, Property 2: Overwrite converges to the healthy state

    For any prior condition list, overwrite produces exactly one entry per
    recognized kind with fixed statuses, and applying it again changes nothing.
    """
    rec = reconciler(overwrite=True, now=now)
    node = rec.reconcile(Node(name="n1", conditions=conditions))

    assert len(node.conditions) == 4
    assert {c.type: c.status for c in node.conditions} == HEALTHY
    assert all(c.last_heartbeat_time == now for c in node.conditions)
    assert all(c.last_transition_time == now for c in node.conditions)

    first = list(node.conditions)
    assert rec.reconcile(node).conditions == first
    assert first == build_default_conditions(now)
