"""
Tests for node state models.
"""

import math

import pytest

from waypoint.core.exceptions import GraphOperationError, InvalidHeuristicError
from waypoint.core.models import NodeState


def test_node_state_defaults():
    """Test a new state is unreached with f consistent with g."""
    state = NodeState("A", 2)

    assert state.h == pytest.approx(2.0)
    assert state.g == math.inf
    assert state.f == math.inf
    assert not state.closed
    assert not state.reached


def test_node_state_invalid_heuristic():
    """Test heuristic validation on creation."""
    with pytest.raises(InvalidHeuristicError, match="non-negative"):
        NodeState("A", -1)


def test_relax_updates_f():
    """Test that relaxing recomputes f from the new g."""
    state = NodeState("A", 2)
    state.relax(5.0, estimate=2.0)

    assert state.g == pytest.approx(5.0)
    assert state.f == pytest.approx(7.0)
    assert state.reached

    state.relax(3.0)
    assert state.f == pytest.approx(3.0)


def test_relax_cannot_increase_cost():
    """Test that g is monotonically non-increasing."""
    state = NodeState("A")
    state.relax(3.0)

    with pytest.raises(ValueError, match="cannot increase"):
        state.relax(4.0)
    assert state.g == pytest.approx(3.0)


def test_closed_state_is_immutable():
    """Test that a finalized state rejects further relaxation."""
    state = NodeState("A")
    state.relax(1.0)
    state.close()

    with pytest.raises(GraphOperationError, match="already finalized"):
        state.relax(0.5)
    assert state.g == pytest.approx(1.0)


def test_fresh_and_snapshot():
    """Test copying states."""
    state = NodeState("A", 1)
    state.relax(4.0, estimate=1.0)

    fresh = state.fresh()
    assert fresh.node_id == "A"
    assert fresh.h == pytest.approx(1.0)
    assert fresh.g == math.inf

    snapshot = state.snapshot()
    assert snapshot.g == pytest.approx(4.0)
    assert snapshot.f == pytest.approx(5.0)
    snapshot.g = 0.0
    assert state.g == pytest.approx(4.0)
