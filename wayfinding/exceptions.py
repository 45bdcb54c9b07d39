"""Exception hierarchy for route planning failures."""

from __future__ import annotations


class WayfindingError(Exception):
    """Base exception for all wayfinding errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class GraphValidationError(WayfindingError):
    """Raised when a waypoint dataset is structurally invalid."""


class UnknownWaypointError(WayfindingError):
    """Raised when a requested waypoint id is not part of the graph."""

    def __init__(self, waypoint_id: str) -> None:
        super().__init__(f"Unknown waypoint: {waypoint_id}", {"waypoint_id": waypoint_id})
        self.waypoint_id = waypoint_id


class NoPathFoundError(WayfindingError):
    """Raised when both waypoints exist but no edge sequence connects them."""

    def __init__(self, start_id: str, goal_id: str) -> None:
        super().__init__(
            f"No navigable route from {start_id} to {goal_id}",
            {"start_id": start_id, "goal_id": goal_id},
        )
        self.start_id = start_id
        self.goal_id = goal_id


class SearchCancelledError(WayfindingError):
    """Raised when a caller cancels a search between node settlements."""
