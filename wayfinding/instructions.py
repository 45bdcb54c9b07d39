"""Turn-by-turn instruction synthesis from a resolved waypoint route."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from wayfinding.geometry import Bearing, bearing, distance, round_length
from wayfinding.graph import Waypoint, WaypointCategory, WaypointGraph


class FloorTransition(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class Instruction:
    """One directed traversal between two adjacent route waypoints."""

    from_id: str
    to_id: str
    bearing: Bearing
    segment_length: float
    text: str
    floor: int
    floor_transition: FloorTransition | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_id,
            "to": self.to_id,
            "bearing": self.bearing.value,
            "segment_length": self.segment_length,
            "text": self.text,
            "floor": self.floor,
            "floor_transition": self.floor_transition.value if self.floor_transition else None,
        }


Phrasing = tuple[str, FloorTransition | None]
PhrasingRule = Callable[[Waypoint, Waypoint, Bearing], Phrasing]


def _transition(src: Waypoint, dst: Waypoint) -> FloorTransition | None:
    if dst.floor > src.floor:
        return FloorTransition.UP
    if dst.floor < src.floor:
        return FloorTransition.DOWN
    return None


def _vertical_rule(label: str) -> PhrasingRule:
    def rule(src: Waypoint, dst: Waypoint, _: Bearing) -> Phrasing:
        change = _transition(src, dst)
        if change is None:
            return f"Continue to the {label}", None
        return f"Take the {label} {change.value} to floor {dst.floor}", change

    return rule


def _room_rule(src: Waypoint, dst: Waypoint, _: Bearing) -> Phrasing:
    return f"Arrive at {dst.id}", None


def _hallway_rule(src: Waypoint, dst: Waypoint, heading: Bearing) -> Phrasing:
    return f"Continue {heading.value} down the hallway", None


def _heading_rule(src: Waypoint, dst: Waypoint, heading: Bearing) -> Phrasing:
    return f"Head {heading.value}", None


# Keyed on the destination waypoint's category.
PHRASING_RULES: dict[WaypointCategory, PhrasingRule] = {
    WaypointCategory.STAIRS: _vertical_rule("stairs"),
    WaypointCategory.ELEVATOR: _vertical_rule("elevator"),
    WaypointCategory.ROOM: _room_rule,
    WaypointCategory.HALLWAY: _hallway_rule,
    WaypointCategory.ENTRANCE: _heading_rule,
    WaypointCategory.OTHER: _heading_rule,
}


def describe_segment(src: Waypoint, dst: Waypoint) -> Instruction:
    """Build the instruction for travelling from `src` to `dst`."""
    heading = bearing(src.position, dst.position)
    text, change = PHRASING_RULES[dst.category](src, dst, heading)
    return Instruction(
        from_id=src.id,
        to_id=dst.id,
        bearing=heading,
        segment_length=round_length(distance(src.position, dst.position)),
        text=text,
        floor=dst.floor,
        floor_transition=change,
    )


def synthesize_instructions(path: Sequence[str], graph: WaypointGraph) -> list[Instruction]:
    """Emit one instruction per consecutive waypoint pair of `path`.

    Args:
        path: Ordered waypoint ids, as returned by `shortest_path`.
        graph: Graph the path was resolved against.

    Returns:
        Instructions in travel order; empty for zero- or one-waypoint paths.
    """
    return [describe_segment(graph[a], graph[b]) for a, b in zip(path, path[1:])]


def extract_touched_waypoints(instructions: Iterable[Instruction]) -> list[str]:
    """Return distinct waypoint ids referenced by instructions, in first-seen order."""
    seen: dict[str, None] = {}
    for step in instructions:
        seen.setdefault(step.from_id)
        seen.setdefault(step.to_id)
    return list(seen)
