"""Navigation graph for St. Lawrence College (floors 1-2)."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from wayfinding.graph import WaypointGraph, graph_from_records

CAMPUS_RECORDS: tuple[dict[str, Any], ...] = (
    # Floor 1
    {
        "id": "ENTRANCE",
        "name": "Main Entrance",
        "position": (0, 1, -4),
        "floor": 1,
        "type": "entrance",
        "connections": ("HALL1_1", "HALL1_2"),
    },
    {
        "id": "HALL1_1",
        "position": (0, 1, -2),
        "floor": 1,
        "type": "hallway",
        "connections": ("ENTRANCE", "HALL1_2", "B101", "STAIRS1"),
    },
    {
        "id": "HALL1_2",
        "position": (2, 1, 0),
        "floor": 1,
        "type": "hallway",
        "connections": ("HALL1_1", "11840", "CAFE", "ELEVATOR1"),
    },
    {
        "id": "STAIRS1",
        "position": (-1, 1, -1),
        "floor": 1,
        "type": "stairs",
        "connections": ("HALL1_1", "STAIRS2"),
    },
    {
        "id": "ELEVATOR1",
        "position": (3, 1, -1),
        "floor": 1,
        "type": "elevator",
        "connections": ("HALL1_2", "ELEVATOR2"),
    },
    {
        "id": "B101",
        "name": "Biology Lab B101",
        "position": (0, 1, -2),
        "floor": 1,
        "type": "room",
        "connections": ("HALL1_1",),
    },
    {
        "id": "11840",
        "name": "Lecture Hall 11840",
        "position": (-2, 1, 2),
        "floor": 1,
        "type": "room",
        "connections": ("HALL1_2",),
    },
    {
        "id": "CAFE",
        "name": "Cafeteria",
        "position": (3, 1, 0),
        "floor": 1,
        "type": "room",
        "connections": ("HALL1_2",),
    },
    # Floor 2
    {
        "id": "STAIRS2",
        "position": (-1, 2, -1),
        "floor": 2,
        "type": "stairs",
        "connections": ("STAIRS1", "HALL2_1"),
    },
    {
        "id": "ELEVATOR2",
        "position": (3, 2, -1),
        "floor": 2,
        "type": "elevator",
        "connections": ("ELEVATOR1", "HALL2_2"),
    },
    {
        "id": "HALL2_1",
        "position": (0, 2, 0),
        "floor": 2,
        "type": "hallway",
        "connections": ("STAIRS2", "HALL2_2", "A233", "C205"),
    },
    {
        "id": "HALL2_2",
        "position": (2, 2, 1),
        "floor": 2,
        "type": "hallway",
        "connections": ("HALL2_1", "ELEVATOR2", "LIB"),
    },
    {
        "id": "A233",
        "name": "Computer Lab A233",
        "position": (2, 2, 0),
        "floor": 2,
        "type": "room",
        "connections": ("HALL2_1",),
    },
    {
        "id": "C205",
        "name": "Chemistry Lab C205",
        "position": (-1, 2, 1),
        "floor": 2,
        "type": "room",
        "connections": ("HALL2_1",),
    },
    {
        "id": "LIB",
        "name": "Library",
        "position": (0, 2, 3),
        "floor": 2,
        "type": "room",
        "connections": ("HALL2_2",),
    },
)


def build_campus_graph() -> WaypointGraph:
    """Construct a fresh campus graph from the static dataset."""
    return graph_from_records(CAMPUS_RECORDS)


@lru_cache(maxsize=1)
def campus_graph() -> WaypointGraph:
    """Return the process-wide campus graph, built on first use."""
    return build_campus_graph()
