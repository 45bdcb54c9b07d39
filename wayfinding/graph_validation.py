"""Quality checks for waypoint graph datasets."""

from __future__ import annotations

from typing import Any

from wayfinding.graph import WaypointGraph


def _floor_elevations(graph: WaypointGraph) -> dict[int, float]:
    totals: dict[int, list[float]] = {}
    for wp in graph.values():
        totals.setdefault(wp.floor, []).append(float(wp.position[1]))
    return {floor: sum(ys) / len(ys) for floor, ys in totals.items()}


def validate_waypoint_graph(graph: WaypointGraph) -> dict[str, Any]:
    """Validate adjacency symmetry, references and floor/elevation consistency."""
    issues: list[dict[str, Any]] = []
    edge_checks = 0

    for wp in graph.values():
        usable = 0
        for nbr_id in wp.neighbors:
            edge_checks += 1
            if nbr_id == wp.id:
                issues.append(
                    {
                        "kind": "self_loop",
                        "severity": "warning",
                        "floor": wp.floor,
                        "waypoint_id": wp.id,
                        "message": "Waypoint lists itself as a neighbor",
                    }
                )
                continue

            nbr = graph.get(nbr_id)
            if nbr is None:
                issues.append(
                    {
                        "kind": "dangling_neighbor",
                        "severity": "error",
                        "floor": wp.floor,
                        "waypoint_id": wp.id,
                        "neighbor_id": nbr_id,
                        "message": f"Neighbor {nbr_id} does not exist",
                    }
                )
                continue

            usable += 1
            if wp.id not in nbr.neighbors:
                issues.append(
                    {
                        "kind": "asymmetric_edge",
                        "severity": "warning",
                        "floor": wp.floor,
                        "waypoint_id": wp.id,
                        "neighbor_id": nbr_id,
                        "message": f"{nbr_id} does not list {wp.id} back",
                    }
                )

        if usable == 0:
            issues.append(
                {
                    "kind": "isolated_waypoint",
                    "severity": "warning",
                    "floor": wp.floor,
                    "waypoint_id": wp.id,
                    "message": "Waypoint has no reachable neighbors",
                }
            )

    # The floor integer is authoritative; y is only checked for plausibility.
    elevations = _floor_elevations(graph)
    if len(elevations) > 1:
        for wp in graph.values():
            y = float(wp.position[1])
            nearest = min(elevations, key=lambda f: (abs(elevations[f] - y), f != wp.floor))
            if nearest != wp.floor:
                issues.append(
                    {
                        "kind": "floor_elevation_mismatch",
                        "severity": "warning",
                        "floor": wp.floor,
                        "waypoint_id": wp.id,
                        "nearest_floor": nearest,
                        "message": f"Elevation y={y:g} is closer to floor {nearest} than to floor {wp.floor}",
                    }
                )

    errors = sum(1 for issue in issues if issue["severity"] == "error")
    warnings = sum(1 for issue in issues if issue["severity"] == "warning")

    return {
        "ok": errors == 0,
        "summary": {
            "waypoints": len(graph),
            "floors": graph.floors(),
            "edge_checks": edge_checks,
            "errors": errors,
            "warnings": warnings,
        },
        "issues": issues,
    }
