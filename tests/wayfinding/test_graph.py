"""Unit tests for waypoint graph construction and validation."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from wayfinding.campus import campus_graph
from wayfinding.exceptions import GraphValidationError
from wayfinding.graph import Waypoint, WaypointCategory, WaypointGraph, graph_from_records
from wayfinding.graph_validation import validate_waypoint_graph


def test_campus_graph_shape(campus: WaypointGraph) -> None:
    """Campus dataset should load all waypoints across two floors."""
    assert len(campus) == 15
    assert campus.floors() == [1, 2]
    assert list(campus)[0] == "ENTRANCE"
    assert campus["LIB"].category is WaypointCategory.ROOM
    assert campus["LIB"].display_name == "Library"
    assert campus["HALL1_1"].display_name == "HALL1_1"


def test_campus_graph_is_shared_instance() -> None:
    """Process-wide campus graph should be built once."""
    assert campus_graph() is campus_graph()


def test_graph_is_read_only(campus: WaypointGraph) -> None:
    """Graph mapping and waypoints should reject mutation."""
    with pytest.raises(TypeError):
        campus["NEW"] = campus["LIB"]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        campus["LIB"].floor = 3  # type: ignore[misc]


def test_get_missing_waypoint_returns_none(campus: WaypointGraph) -> None:
    """Lookups on unknown ids should return None instead of raising."""
    assert campus.get("NOPE") is None
    assert list(campus.neighbors_of("NOPE")) == []


def test_dangling_neighbor_rejected_in_strict_mode() -> None:
    """Strict construction should reject unknown neighbor ids."""
    records = [{"id": "A", "position": (0, 0, 0), "floor": 1, "type": "room", "connections": ["GHOST"]}]

    with pytest.raises(GraphValidationError, match="unknown neighbor GHOST") as exc_info:
        graph_from_records(records)
    assert exc_info.value.details == {"waypoint_id": "A", "neighbor_id": "GHOST"}


def test_dangling_neighbor_skipped_in_lenient_mode() -> None:
    """Lenient construction should keep the record but skip the dangling edge."""
    records = [
        {"id": "A", "position": (0, 0, 0), "floor": 1, "type": "hallway", "connections": ["GHOST", "B"]},
        {"id": "B", "position": (1, 0, 0), "floor": 1, "type": "room", "connections": ["A"]},
    ]
    graph = graph_from_records(records, strict=False)

    assert [wp.id for wp in graph.neighbors_of("A")] == ["B"]
    assert graph["A"].neighbors == ("GHOST", "B")


def test_duplicate_ids_rejected() -> None:
    """Two waypoints with one id should fail construction."""
    wp = Waypoint(id="A", position=(0.0, 0.0, 0.0), floor=1, category=WaypointCategory.ROOM)
    with pytest.raises(GraphValidationError, match="Duplicate"):
        WaypointGraph([wp, wp])


def test_bad_position_rejected() -> None:
    """Positions must have exactly three components."""
    with pytest.raises(GraphValidationError, match="3 components"):
        graph_from_records([{"id": "A", "position": (0, 0), "floor": 1, "type": "room"}])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("stairs", WaypointCategory.STAIRS),
        ("Elevator", WaypointCategory.ELEVATOR),
        ("lab", WaypointCategory.OTHER),
        (None, WaypointCategory.OTHER),
        (WaypointCategory.ROOM, WaypointCategory.ROOM),
    ],
)
def test_category_parse(raw, expected: WaypointCategory) -> None:
    """Category labels should parse case-insensitively with OTHER as fallback."""
    assert WaypointCategory.parse(raw) is expected


def test_filtered_views(campus: WaypointGraph) -> None:
    """Floor and category views should return matching waypoints."""
    assert {wp.id for wp in campus.by_category("stairs")} == {"STAIRS1", "STAIRS2"}
    assert {wp.id for wp in campus.by_floor(2)} == {
        "STAIRS2",
        "ELEVATOR2",
        "HALL2_1",
        "HALL2_2",
        "A233",
        "C205",
        "LIB",
    }


def test_validate_campus_graph_flags_one_way_entrance_edge(campus: WaypointGraph) -> None:
    """Campus report should pass and flag only the one-way entrance edge."""
    report = validate_waypoint_graph(campus)

    assert report["ok"] is True
    assert report["summary"]["errors"] == 0
    assert report["summary"]["floors"] == [1, 2]
    asymmetric = [issue for issue in report["issues"] if issue["kind"] == "asymmetric_edge"]
    assert [(i["waypoint_id"], i["neighbor_id"]) for i in asymmetric] == [("ENTRANCE", "HALL1_2")]
    assert not any(issue["kind"] == "floor_elevation_mismatch" for issue in report["issues"])


def test_validate_flags_dangling_and_elevation_mismatch() -> None:
    """Report should flag dangling refs, isolated nodes and misplaced elevations."""
    records = [
        {"id": "A", "position": (0, 0, 0), "floor": 1, "type": "hallway", "connections": ["B", "GHOST"]},
        {"id": "B", "position": (1, 0, 0), "floor": 1, "type": "hallway", "connections": ["A", "C"]},
        {"id": "C", "position": (2, 0, 0), "floor": 1, "type": "hallway", "connections": ["B"]},
        {"id": "D", "position": (0, 3, 0), "floor": 2, "type": "hallway", "connections": ["E"]},
        {"id": "E", "position": (1, 3, 0), "floor": 2, "type": "hallway", "connections": ["D"]},
        {"id": "F", "position": (2, 0, 0), "floor": 2, "type": "room", "connections": []},
    ]
    report = validate_waypoint_graph(graph_from_records(records, strict=False))
    kinds = {(issue["kind"], issue["waypoint_id"]) for issue in report["issues"]}

    assert report["ok"] is False
    assert ("dangling_neighbor", "A") in kinds
    assert ("floor_elevation_mismatch", "F") in kinds
    assert ("isolated_waypoint", "F") in kinds


@pytest.mark.parametrize("missing", ["id", "floor", "position"])
def test_record_missing_required_field_rejected(missing: str) -> None:
    """Records without id, floor or position should fail with GraphValidationError."""
    record = {"id": "A", "position": (0, 1, 0), "floor": 1, "type": "room", "connections": []}
    del record[missing]

    with pytest.raises(GraphValidationError, match="missing") as exc_info:
        graph_from_records([record])
    assert exc_info.value.details["field"] == missing


def test_record_with_non_numeric_floor_rejected() -> None:
    """Non-numeric floor values should be reported as validation errors."""
    record = {"id": "A", "position": (0, 1, 0), "floor": "ground", "type": "room"}

    with pytest.raises(GraphValidationError, match="non-numeric") as exc_info:
        graph_from_records([record])
    assert exc_info.value.details == {"waypoint_id": "A"}


def test_record_accepts_numpy_position() -> None:
    """Array positions should be accepted and stored as float tuples."""
    graph = graph_from_records(
        [{"id": "A", "position": np.array([1, 2, 3]), "floor": 2, "type": "room", "connections": []}]
    )

    assert graph["A"].position == (1.0, 2.0, 3.0)
    assert isinstance(graph["A"].position[0], float)
