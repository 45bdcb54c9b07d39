"""FastAPI routes exposing the route planner to presentation clients.

Routes:
- `/health`, `/waypoints`, `/waypoints/{waypoint_id}` for graph discovery
- `/graph/validation` for the dataset quality report
- `/route` for turn-by-turn route planning
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from wayfinding.exceptions import NoPathFoundError, UnknownWaypointError
from wayfinding.graph import Waypoint, WaypointCategory
from wayfinding.graph_validation import validate_waypoint_graph
from wayfinding.logging_config import get_logger
from wayfinding.planner import RoutePlanner, default_planner
from wayfinding.settings import Settings, load_settings

log = get_logger(__name__)


class WaypointModel(BaseModel):
    """Public view of one waypoint."""

    id: str
    name: str
    floor: int
    category: WaypointCategory
    position: tuple[float, float, float]
    neighbors: list[str]


class RouteRequest(BaseModel):
    """Request payload for route planning."""

    start_id: str = Field(..., min_length=1)
    goal_id: str = Field(..., min_length=1)


class InstructionModel(BaseModel):
    """One turn-by-turn step."""

    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(..., alias="from")
    to_id: str = Field(..., alias="to")
    bearing: str
    segment_length: float = Field(..., ge=0.0)
    text: str
    floor: int
    floor_transition: str | None = None


class RouteResponse(BaseModel):
    """Response payload for route planning requests."""

    start_id: str
    goal_id: str
    waypoint_ids: list[str]
    instructions: list[InstructionModel]
    touched_waypoints: list[str]
    total_distance: float
    floors_visited: list[int]


def _serialize_waypoint(wp: Waypoint) -> WaypointModel:
    return WaypointModel(
        id=wp.id,
        name=wp.display_name,
        floor=wp.floor,
        category=wp.category,
        position=wp.position,
        neighbors=list(wp.neighbors),
    )


def create_app(planner: RoutePlanner | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    planner = planner or default_planner()
    settings = settings or load_settings()

    app = FastAPI(title="Wayfinding API", version="1.0.0")

    cors_origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=cors_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, Any]:
        """Health endpoint with loaded graph metadata."""
        return {
            "status": "ok",
            "version": app.version,
            "waypoints": len(planner.graph),
            "floors": planner.graph.floors(),
        }

    @app.get("/waypoints", response_model=list[WaypointModel])
    async def list_waypoints(
        floor: int | None = Query(default=None),
        category: WaypointCategory | None = Query(default=None),
    ) -> list[WaypointModel]:
        """List waypoints, optionally filtered by floor and category."""
        waypoints = list(planner.graph.values())
        if floor is not None:
            waypoints = [wp for wp in waypoints if wp.floor == floor]
        if category is not None:
            waypoints = [wp for wp in waypoints if wp.category is category]
        return [_serialize_waypoint(wp) for wp in waypoints]

    @app.get("/waypoints/{waypoint_id}", response_model=WaypointModel)
    async def get_waypoint(waypoint_id: str) -> WaypointModel:
        wp = planner.graph.get(waypoint_id)
        if wp is None:
            raise HTTPException(status_code=404, detail=f"Unknown waypoint: {waypoint_id}")
        return _serialize_waypoint(wp)

    @app.get("/graph/validation")
    async def graph_validation() -> dict[str, Any]:
        """Return the waypoint dataset quality report."""
        return validate_waypoint_graph(planner.graph)

    @app.post("/route", response_model=RouteResponse, response_model_by_alias=True)
    async def plan_route(payload: RouteRequest) -> RouteResponse:
        """Plan a turn-by-turn route between two waypoints."""
        try:
            route = planner.plan_route(payload.start_id, payload.goal_id)
        except UnknownWaypointError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc
        except NoPathFoundError as exc:
            raise HTTPException(status_code=404, detail="No navigable route found") from exc

        return RouteResponse(
            start_id=payload.start_id,
            goal_id=payload.goal_id,
            waypoint_ids=route.waypoint_ids,
            instructions=[InstructionModel(**step.to_dict()) for step in route.instructions],
            touched_waypoints=route.touched_waypoints,
            total_distance=route.total_distance,
            floors_visited=route.floors_visited,
        )

    log.info("Wayfinding API ready with {} waypoints", len(planner.graph))
    return app
