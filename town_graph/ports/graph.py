"""Graph ports - Abstractions for road import and routing.

These protocols define the contracts between the town graph services and
the adapters that feed roads into it or compute routes over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RoadRecord, RouteResult, Town
    from ..graph.graph import Graph


class RoadRepositoryPort(Protocol):
    """Port for loading road records.

    Implementation: adapters/graph/text_repository.py

    The repository reads roads from persistent storage and returns them
    as plain records; it never touches the graph itself.
    """

    def load(self) -> Sequence[RoadRecord]:
        """Load every road record from the source.

        Returns:
            The records in source order.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, departure: Town, arrival: Town) -> RouteResult:
        """Find the shortest route between two towns.

        Args:
            graph: The town graph.
            departure: Departure town.
            arrival: Arrival town.

        Returns:
            RouteResult with the towns and roads travelled.
        """
        ...

    def solve_safe(self, graph: Graph, departure: Town, arrival: Town) -> RouteResult:
        """Like solve(), but returns an empty result instead of raising."""
        ...
