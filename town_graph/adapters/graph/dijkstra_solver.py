"""Dijkstra Route Solver adapter.

This adapter wraps the ShortestPathEngine and adds:
- Domain model output (RouteResult)
- Strict and safe calling conventions
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError
from ...domain.models import RouteResult, Town
from ...graph.dijkstra import INFINITY, ShortestPathEngine
from ...graph.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, departure: Town, arrival: Town) -> RouteResult:
        """Find the shortest route between two towns.

        Args:
            graph: The town graph.
            departure: Departure town.
            arrival: Arrival town.

        Returns:
            RouteResult with the towns and roads travelled.

        Raises:
            InvalidInputError: If a town is None.
            UnknownTownError: If departure or arrival is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        route = self._solve(graph, departure, arrival)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"departure": departure.name, "arrival": arrival.name},
            )
            raise NoRouteFoundError(
                f"No path from {departure.name} to {arrival.name}",
                departure=departure.name,
                arrival=arrival.name,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure.name,
                "arrival": arrival.name,
                "stops": route.num_stops,
                "distance_mi": route.total_distance,
            },
        )
        return route

    def solve_safe(self, graph: Graph, departure: Town, arrival: Town) -> RouteResult:
        """Find the shortest route, returning an empty result when there is none.

        Invalid towns still raise, only unreachability is absorbed.
        """
        return self._solve(graph, departure, arrival)

    def _solve(self, graph: Graph, departure: Town, arrival: Town) -> RouteResult:
        engine = ShortestPathEngine(graph)
        engine.require_town(arrival, "arrival")
        predecessors = engine.compute_from(departure)
        hops = engine.reconstruct(predecessors, arrival)

        if not hops:
            return RouteResult(path=(), total_distance=INFINITY)

        path = (hops[0].source.name,) + tuple(hop.destination.name for hop in hops)
        return RouteResult(
            path=path,
            hops=tuple(hops),
            total_distance=sum(hop.weight for hop in hops),
        )
