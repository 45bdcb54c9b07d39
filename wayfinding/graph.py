"""Immutable waypoint graph for a multi-floor building."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from wayfinding.exceptions import GraphValidationError
from wayfinding.geometry import Position
from wayfinding.logging_config import get_logger

log = get_logger(__name__)


class WaypointCategory(str, Enum):
    """Closed set of waypoint kinds; each has exactly one phrasing rule."""

    ROOM = "room"
    HALLWAY = "hallway"
    STAIRS = "stairs"
    ELEVATOR = "elevator"
    ENTRANCE = "entrance"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str | WaypointCategory | None) -> WaypointCategory:
        """Parse a raw category label, mapping unknown labels to OTHER."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Waypoint:
    """A navigable point in the building graph."""

    id: str
    position: Position
    floor: int
    category: WaypointCategory
    neighbors: tuple[str, ...] = field(default_factory=tuple)
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


class WaypointGraph(Mapping[str, Waypoint]):
    """Read-only id -> Waypoint mapping with validated adjacency.

    Iteration follows insertion order, which the solver relies on for
    deterministic tie-breaking.

    Args:
        waypoints: Waypoints in dataset order.
        strict: Reject dangling neighbor references when True; otherwise
            log them and let the solver skip them.

    Raises:
        GraphValidationError: On duplicate ids, or dangling neighbors in strict mode.
    """

    def __init__(self, waypoints: Iterable[Waypoint], *, strict: bool = True) -> None:
        nodes: dict[str, Waypoint] = {}
        for wp in waypoints:
            if wp.id in nodes:
                raise GraphValidationError(f"Duplicate waypoint id: {wp.id}", {"waypoint_id": wp.id})
            nodes[wp.id] = wp

        dangling = [(wp.id, nbr) for wp in nodes.values() for nbr in wp.neighbors if nbr not in nodes]
        if dangling:
            if strict:
                src, nbr = dangling[0]
                raise GraphValidationError(
                    f"Waypoint {src} references unknown neighbor {nbr}",
                    {"waypoint_id": src, "neighbor_id": nbr},
                )
            for src, nbr in dangling:
                log.warning("Waypoint {} references unknown neighbor {}; edge ignored", src, nbr)

        self._nodes: Mapping[str, Waypoint] = MappingProxyType(nodes)

    def __getitem__(self, waypoint_id: str) -> Waypoint:
        return self._nodes[waypoint_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"WaypointGraph({len(self)} waypoints, floors={self.floors()})"

    def neighbors_of(self, waypoint_id: str) -> Iterator[Waypoint]:
        """Yield existing neighbors of a waypoint, skipping dangling ids."""
        wp = self._nodes.get(waypoint_id)
        if wp is None:
            return
        for nbr_id in wp.neighbors:
            nbr = self._nodes.get(nbr_id)
            if nbr is not None:
                yield nbr

    def floors(self) -> list[int]:
        return sorted({wp.floor for wp in self._nodes.values()})

    def by_floor(self, floor: int) -> list[Waypoint]:
        return [wp for wp in self._nodes.values() if wp.floor == floor]

    def by_category(self, category: WaypointCategory | str) -> list[Waypoint]:
        wanted = WaypointCategory.parse(category)
        return [wp for wp in self._nodes.values() if wp.category is wanted]


def waypoint_from_record(record: dict[str, Any]) -> Waypoint:
    """Build a Waypoint from a plain dataset record.

    Raises:
        GraphValidationError: If `id`, `floor` or `position` is missing or malformed.
    """
    raw_id = record.get("id")
    if raw_id is None or str(raw_id).strip() == "":
        raise GraphValidationError("Waypoint record is missing an id", {"field": "id"})
    waypoint_id = str(raw_id)

    for required in ("floor", "position"):
        if record.get(required) is None:
            raise GraphValidationError(
                f"Waypoint {waypoint_id} is missing {required}",
                {"waypoint_id": waypoint_id, "field": required},
            )

    try:
        pos = [float(v) for v in record["position"]]
        floor = int(record["floor"])
    except (TypeError, ValueError) as exc:
        raise GraphValidationError(
            f"Waypoint {waypoint_id} has a non-numeric position or floor",
            {"waypoint_id": waypoint_id},
        ) from exc

    if len(pos) != 3:
        raise GraphValidationError(
            f"Waypoint {waypoint_id} position must have 3 components",
            {"waypoint_id": waypoint_id, "field": "position"},
        )

    return Waypoint(
        id=waypoint_id,
        position=(pos[0], pos[1], pos[2]),
        floor=floor,
        category=WaypointCategory.parse(record.get("category", record.get("type"))),
        neighbors=tuple(str(n) for n in record.get("neighbors", record.get("connections", []))),
        name=record.get("name"),
    )


def graph_from_records(records: Iterable[dict[str, Any]], *, strict: bool = True) -> WaypointGraph:
    """Construct a WaypointGraph from dataset records."""
    return WaypointGraph((waypoint_from_record(r) for r in records), strict=strict)
