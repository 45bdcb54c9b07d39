"""Pytest global fixtures for waypoint graphs and planners."""

from __future__ import annotations

import pytest

from wayfinding.campus import build_campus_graph
from wayfinding.graph import WaypointGraph, graph_from_records
from wayfinding.planner import RoutePlanner


def _node(node_id: str, pos: tuple[float, float, float], neighbors: list[str], **extra) -> dict:
    record = {
        "id": node_id,
        "position": pos,
        "floor": extra.pop("floor", 1),
        "type": extra.pop("type", "hallway"),
        "connections": neighbors,
    }
    record.update(extra)
    return record


@pytest.fixture()
def campus() -> WaypointGraph:
    """Provide a freshly built campus graph."""
    return build_campus_graph()


@pytest.fixture()
def planner(campus: WaypointGraph) -> RoutePlanner:
    return RoutePlanner(campus)


@pytest.fixture()
def mesh_graph() -> WaypointGraph:
    """Small single-floor graph with several competing routes between A and F."""
    return graph_from_records(
        [
            _node("A", (0, 0, 0), ["B", "C"]),
            _node("B", (2, 0, 1), ["A", "C", "D"]),
            _node("C", (1, 0, -2), ["A", "B", "E"]),
            _node("D", (4, 0, 2), ["B", "E", "F"]),
            _node("E", (3, 0, -1), ["C", "D", "F"]),
            _node("F", (6, 0, 0), ["D", "E"]),
        ]
    )


@pytest.fixture()
def split_graph() -> WaypointGraph:
    """Two disconnected components: {A, B} and {X, Y}."""
    return graph_from_records(
        [
            _node("A", (0, 0, 0), ["B"]),
            _node("B", (1, 0, 0), ["A"]),
            _node("X", (5, 0, 5), ["Y"]),
            _node("Y", (6, 0, 5), ["X"]),
        ]
    )
