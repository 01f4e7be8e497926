"""Undirected weighted graph of towns and roads.

Towns are stored by name and roads by the sorted pair of their town names,
so uniqueness follows the value semantics of :class:`Town` and
:class:`Road`: a graph never holds two towns with the same name nor two
roads between the same pair of towns. An incidence index keeps
``edges_of`` independent of the total number of roads.

The graph is meant for a single writer; the views returned by
``vertex_set`` and ``edge_set`` must not be iterated while the graph is
being modified.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple, ValuesView

from ..domain.errors import InvalidInputError, UnknownTownError
from ..domain.models import Road, Town
from .dijkstra import PredecessorMap, ShortestPathEngine

# Weight value accepted by remove_edge to match a road of any weight
ANY_WEIGHT = -1

RoadKey = Tuple[str, str]


def road_key(source: Town, destination: Town) -> RoadKey:
    """Return the canonical key of the road joining two towns."""
    a, b = source.name, destination.name
    return (a, b) if a <= b else (b, a)


class Graph:
    """Container of towns and the roads joining them."""

    def __init__(self) -> None:
        self._towns: Dict[str, Town] = {}
        self._roads: Dict[RoadKey, Road] = {}
        self._incident: Dict[str, Dict[RoadKey, Road]] = {}
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Towns
    # ------------------------------------------------------------------

    def add_vertex(self, town: Town) -> bool:
        """Add ``town`` unless a town with the same name is already present.

        Returns:
            True if the town was added, False if it already existed.

        Raises:
            InvalidInputError: If ``town`` is None.
        """
        if town is None:
            raise InvalidInputError("Cannot add a missing town", argument="town")
        if town.name in self._towns:
            return False

        self._towns[town.name] = town
        self._incident[town.name] = {}
        self._logger.debug("Town added", extra={"town": town.name})
        return True

    def remove_vertex(self, town: Optional[Town]) -> bool:
        """Remove ``town`` and every road touching it.

        Returns:
            True if the town was present, False otherwise.
        """
        if town is None or town.name not in self._towns:
            return False

        touching: List[Road] = list(self._incident[town.name].values())
        for road in touching:
            self._discard_road(road)

        del self._incident[town.name]
        del self._towns[town.name]
        self._logger.debug(
            "Town removed",
            extra={"town": town.name, "roads_removed": len(touching)},
        )
        return True

    def contains_vertex(self, town: Optional[Town]) -> bool:
        return town is not None and town.name in self._towns

    def get_vertex(self, name: str) -> Optional[Town]:
        """Return the stored town called ``name``, or None."""
        return self._towns.get(name)

    def vertex_set(self) -> ValuesView[Town]:
        """Return a live view of the towns in this graph."""
        return self._towns.values()

    # ------------------------------------------------------------------
    # Roads
    # ------------------------------------------------------------------

    def add_edge(
        self, source: Town, destination: Town, weight: int, name: str
    ) -> Optional[Road]:
        """Create a road between two towns already in the graph.

        A second road between the same pair of towns is not added and the
        existing one is left untouched.

        Returns:
            The new road, or None if the towns were already connected.

        Raises:
            InvalidInputError: If an endpoint is None or the weight is invalid.
            UnknownTownError: If an endpoint is not in the graph.
        """
        if source is None or destination is None:
            raise InvalidInputError(
                "Cannot add a road with a missing town", argument="town"
            )
        for town in (source, destination):
            if town.name not in self._towns:
                raise UnknownTownError(
                    f"Town not in graph: {town.name}",
                    argument="town",
                    town_name=town.name,
                )

        road = Road(
            self._towns[source.name], self._towns[destination.name], weight, name
        )
        key = road.key
        if key in self._roads:
            return None

        self._roads[key] = road
        self._incident[source.name][key] = road
        self._incident[destination.name][key] = road
        self._logger.debug(
            "Road added",
            extra={"road": name, "between": key, "weight": weight},
        )
        return road

    def remove_edge(
        self,
        source: Town,
        destination: Town,
        weight: Optional[int] = ANY_WEIGHT,
        name: Optional[str] = None,
    ) -> Optional[Road]:
        """Remove the road joining two towns.

        ``weight`` is only checked when it is not ``ANY_WEIGHT`` (or None)
        and ``name`` only when it is not None, so the same call serves both
        "remove by towns" and "remove this exact road".

        Returns:
            The removed road, or None if no road matched.

        Raises:
            InvalidInputError: If an endpoint is None.
        """
        if source is None or destination is None:
            raise InvalidInputError(
                "Cannot remove a road with a missing town", argument="town"
            )

        road = self._roads.get(road_key(source, destination))
        if road is None:
            return None
        if weight is not None and weight != ANY_WEIGHT and road.weight != weight:
            return None
        if name is not None and road.name != name:
            return None

        self._discard_road(road)
        self._logger.debug(
            "Road removed", extra={"road": road.name, "between": road.key}
        )
        return road

    def get_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[Road]:
        """Return the road joining two towns, in its stored orientation."""
        if source is None or destination is None:
            return None
        return self._roads.get(road_key(source, destination))

    def contains_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> bool:
        return self.get_edge(source, destination) is not None

    def edges_of(self, town: Town) -> Set[Road]:
        """Return every road touching ``town``.

        Raises:
            InvalidInputError: If ``town`` is None.
            UnknownTownError: If ``town`` is not in the graph.
        """
        if town is None:
            raise InvalidInputError("Cannot list roads of a missing town", argument="town")
        incident = self._incident.get(town.name)
        if incident is None:
            raise UnknownTownError(
                f"Town not in graph: {town.name}",
                argument="town",
                town_name=town.name,
            )
        return set(incident.values())

    def edge_set(self) -> ValuesView[Road]:
        """Return a live view of the roads in this graph."""
        return self._roads.values()

    def _discard_road(self, road: Road) -> None:
        key = road.key
        del self._roads[key]
        self._incident[road.source.name].pop(key, None)
        self._incident[road.destination.name].pop(key, None)

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def dijkstra_shortest_path(self, source: Town) -> PredecessorMap:
        """Run Dijkstra from ``source`` and return its predecessor map."""
        return ShortestPathEngine(self).compute_from(source)

    def shortest_path(self, source: Town, destination: Town) -> List[str]:
        """Return the formatted hops of the shortest path, or [] if none."""
        return ShortestPathEngine(self).build_path(source, destination)

    def __len__(self) -> int:
        return len(self._towns)

    def __contains__(self, town: object) -> bool:
        return isinstance(town, Town) and town.name in self._towns
