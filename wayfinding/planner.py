"""Route planning facade used by presentation-layer callers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import lru_cache

from wayfinding.campus import campus_graph
from wayfinding.exceptions import NoPathFoundError, UnknownWaypointError
from wayfinding.geometry import round_length
from wayfinding.graph import WaypointGraph
from wayfinding.instructions import Instruction, extract_touched_waypoints, synthesize_instructions
from wayfinding.logging_config import get_logger, route_logger
from wayfinding.pathfinding import path_length, shortest_path

log = get_logger(__name__)


@dataclass(slots=True)
class Route:
    """Structured route result payload."""

    waypoint_ids: list[str]
    instructions: list[Instruction]
    total_distance: float
    floors_visited: list[int] = field(default_factory=list)

    @property
    def touched_waypoints(self) -> list[str]:
        return extract_touched_waypoints(self.instructions)


class RoutePlanner:
    """Plan routes over one immutable waypoint graph.

    The planner keeps no per-request state, so one instance can serve
    concurrent requests.
    """

    def __init__(self, graph: WaypointGraph) -> None:
        self.graph = graph

    def plan_route(
        self,
        start_id: str,
        goal_id: str,
        *,
        should_cancel: Callable[[], bool] | None = None,
    ) -> Route:
        """Resolve a full route with summary data.

        Raises:
            UnknownWaypointError: If either id is not in the graph.
            NoPathFoundError: If the two waypoints are not connected.
        """
        route_log = route_logger(log, start_id, goal_id)
        route_log.debug("Planning route {} -> {}", start_id, goal_id)
        try:
            path = shortest_path(self.graph, start_id, goal_id, should_cancel=should_cancel)
        except UnknownWaypointError as exc:
            route_log.info("Route request rejected: {}", exc.message)
            raise
        except NoPathFoundError as exc:
            route_log.info("No route: {}", exc.message)
            raise

        instructions = synthesize_instructions(path, self.graph)

        floors: list[int] = []
        for waypoint_id in path:
            floor = self.graph[waypoint_id].floor
            if not floors or floors[-1] != floor:
                floors.append(floor)

        route = Route(
            waypoint_ids=path,
            instructions=instructions,
            total_distance=round_length(path_length(self.graph, path)),
            floors_visited=floors,
        )
        route_log.bind(steps=len(instructions), total_distance=route.total_distance).debug(
            "Planned {} -> {}: {} steps, {} m",
            start_id,
            goal_id,
            len(instructions),
            route.total_distance,
        )
        return route

    def plan(self, start_id: str, goal_id: str) -> list[Instruction]:
        """Return ordered instructions from `start_id` to `goal_id`."""
        return self.plan_route(start_id, goal_id).instructions

    @staticmethod
    def extract_touched_waypoints(instructions: Iterable[Instruction]) -> list[str]:
        return extract_touched_waypoints(instructions)


@lru_cache(maxsize=1)
def default_planner() -> RoutePlanner:
    """Return the process-wide planner over the campus graph."""
    return RoutePlanner(campus_graph())
