"""Dijkstra shortest-path search over a waypoint graph.

Purpose:
- Compute the minimum-distance waypoint sequence between two waypoints.
- Use Euclidean distance between waypoint positions as the edge weight.

Usage example:
    >>> from wayfinding.campus import campus_graph
    >>> from wayfinding.pathfinding import shortest_path
    >>> shortest_path(campus_graph(), "ENTRANCE", "B101")
    ['ENTRANCE', 'HALL1_1', 'B101']
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, Sequence

from wayfinding.exceptions import NoPathFoundError, SearchCancelledError, UnknownWaypointError
from wayfinding.geometry import distance
from wayfinding.graph import WaypointGraph


def _reconstruct(previous: dict[str, str | None], start_id: str, goal_id: str) -> list[str]:
    """Walk predecessors back from goal; fail unless the walk ends at start."""
    path = [goal_id]
    current = goal_id
    while current != start_id:
        prev = previous.get(current)
        if prev is None:
            raise NoPathFoundError(start_id, goal_id)
        path.append(prev)
        current = prev
    path.reverse()
    return path


def shortest_path(
    graph: WaypointGraph,
    start_id: str,
    goal_id: str,
    *,
    should_cancel: Callable[[], bool] | None = None,
) -> list[str]:
    """Compute the shortest waypoint route via Dijkstra.

    Args:
        graph: Waypoint graph to search.
        start_id: Start waypoint id.
        goal_id: Goal waypoint id.
        should_cancel: Optional callback polled between node settlements.

    Returns:
        Ordered waypoint ids from start to goal, inclusive. A single-item
        list when start and goal are the same waypoint.

    Raises:
        UnknownWaypointError: If either id is not in the graph.
        NoPathFoundError: If the goal is unreachable from the start.
        SearchCancelledError: If `should_cancel` returns True.
    """
    for waypoint_id in (start_id, goal_id):
        if waypoint_id not in graph:
            raise UnknownWaypointError(waypoint_id)

    if start_id == goal_id:
        return [start_id]

    # Insertion order breaks distance ties deterministically.
    order = {waypoint_id: idx for idx, waypoint_id in enumerate(graph)}

    dist: dict[str, float] = {start_id: 0.0}
    previous: dict[str, str | None] = {start_id: None}
    settled: set[str] = set()

    open_heap: list[tuple[float, int, str]] = [(0.0, order[start_id], start_id)]

    while open_heap:
        current_dist, _, current = heapq.heappop(open_heap)

        if current in settled:
            continue
        if should_cancel is not None and should_cancel():
            raise SearchCancelledError(
                f"Route search from {start_id} to {goal_id} was cancelled",
                {"start_id": start_id, "goal_id": goal_id},
            )

        settled.add(current)

        if current == goal_id:
            return _reconstruct(previous, start_id, goal_id)

        node = graph[current]
        for neighbor in graph.neighbors_of(current):
            if neighbor.id in settled:
                continue

            tentative = current_dist + distance(node.position, neighbor.position)
            if tentative < dist.get(neighbor.id, float("inf")):
                dist[neighbor.id] = tentative
                previous[neighbor.id] = current
                heapq.heappush(open_heap, (tentative, order[neighbor.id], neighbor.id))

    raise NoPathFoundError(start_id, goal_id)


def path_length(graph: WaypointGraph, path: Sequence[str]) -> float:
    """Return the summed edge distance along a waypoint sequence."""
    return sum(
        distance(graph[a].position, graph[b].position) for a, b in zip(path, path[1:])
    )
