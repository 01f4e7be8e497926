"""Shortest-path computation using Dijkstra's algorithm.

The engine works directly on a :class:`~town_graph.graph.graph.Graph`.
Each call to ``compute_from`` builds a fresh distance and predecessor
table and hands it back to the caller as a :class:`PredecessorMap`;
nothing is kept on the engine or on the graph between queries.

The closest unvisited town is found by a linear scan, which is O(V^2)
overall and fine for regional road networks of a few hundred towns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from ..domain.errors import InvalidInputError, UnknownTownError
from ..domain.models import PathHop, Town

if TYPE_CHECKING:
    from .graph import Graph

INFINITY = float("inf")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredecessorMap:
    """Output of a single Dijkstra run.

    Attributes:
        source: Town the run started from
        distances: Town name -> shortest known distance (``inf`` if unreachable)
        predecessors: Town name -> previous town on the shortest path
    """

    source: Town
    distances: Dict[str, float] = field(default_factory=dict)
    predecessors: Dict[str, Optional[Town]] = field(default_factory=dict)

    def distance_to(self, town: Town) -> float:
        return self.distances.get(town.name, INFINITY)

    def predecessor_of(self, town: Town) -> Optional[Town]:
        return self.predecessors.get(town.name)

    def is_reachable(self, town: Town) -> bool:
        return self.distance_to(town) != INFINITY


class ShortestPathEngine:
    """Single-source Dijkstra over the towns and roads of a graph."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def compute_from(self, source: Town) -> PredecessorMap:
        """Compute shortest distances from ``source`` to every town.

        Raises:
            InvalidInputError: If ``source`` is None.
            UnknownTownError: If ``source`` is not in the graph.
        """
        self.require_town(source, "source")

        unvisited: List[Town] = list(self.graph.vertex_set())
        distances: Dict[str, float] = {town.name: INFINITY for town in unvisited}
        predecessors: Dict[str, Optional[Town]] = {town.name: None for town in unvisited}
        distances[source.name] = 0

        while unvisited:
            # first minimum in working-list order wins ties
            closest = 0
            for i in range(1, len(unvisited)):
                if distances[unvisited[i].name] < distances[unvisited[closest].name]:
                    closest = i
            current = unvisited.pop(closest)
            current_distance = distances[current.name]

            for road in self.graph.edges_of(current):
                neighbor = road.other(current)
                candidate = current_distance + road.weight
                if candidate < distances[neighbor.name]:
                    distances[neighbor.name] = candidate
                    predecessors[neighbor.name] = current

        logger.debug(
            "Dijkstra run complete",
            extra={
                "source": source.name,
                "towns": len(distances),
                "reachable": sum(1 for d in distances.values() if d != INFINITY),
            },
        )
        return PredecessorMap(source=source, distances=distances, predecessors=predecessors)

    def reconstruct(self, predecessors: PredecessorMap, destination: Town) -> List[PathHop]:
        """Walk the predecessor map back from ``destination`` to its source.

        The walk is bounded by the number of towns in the graph; running
        into a town without predecessor, or exceeding the bound, means the
        destination is unreachable and an empty list is returned.
        """
        source = predecessors.source
        hops: List[PathHop] = []
        current = destination
        remaining = len(self.graph)

        while current != source:
            previous = predecessors.predecessor_of(current)
            if previous is None or remaining <= 0:
                return []
            road = self.graph.get_edge(previous, current)
            if road is None:
                return []
            hops.append(PathHop(source=previous, road=road, destination=current))
            current = previous
            remaining -= 1

        hops.reverse()
        return hops

    def build_path(self, source: Town, destination: Town) -> List[str]:
        """Return the shortest path from ``source`` to ``destination``.

        Each element reads ``"<Source> via <Road> to <Dest> <Weight> mi"``,
        in travel order. An unreachable destination yields an empty list.

        Raises:
            InvalidInputError: If either town is None.
            UnknownTownError: If either town is not in the graph.
        """
        self.require_town(destination, "destination")
        predecessors = self.compute_from(source)
        return [hop.describe() for hop in self.reconstruct(predecessors, destination)]

    def require_town(self, town: Optional[Town], argument: str) -> None:
        if town is None:
            raise InvalidInputError(f"Missing {argument} town", argument=argument)
        if not self.graph.contains_vertex(town):
            raise UnknownTownError(
                f"Town not in graph: {town.name}",
                argument=argument,
                town_name=town.name,
            )
