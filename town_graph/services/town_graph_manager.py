"""Town graph manager - Name-keyed facade over the graph.

Callers talk about towns and roads by name; the manager builds the
Town values, delegates to the Graph and to the route solver, and turns
results back into names and formatted strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..adapters.graph import DijkstraRouteSolver, TextRoadRepository
from ..domain.errors import ConfigurationError
from ..domain.models import Road, RoadRecord, RouteResult, Town
from ..graph.dijkstra import INFINITY
from ..graph.graph import Graph
from ..ports.graph import RoadRepositoryPort, RouteSolverPort


@dataclass
class TownGraphManager:
    """Main service for building and querying a town graph.

    Attributes:
        graph: The underlying town graph
        route_solver: Computes shortest routes
        road_repository: Optional source of roads for populate_town_graph()
    """

    graph: Graph = field(default_factory=Graph)
    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)
    road_repository: Optional[RoadRepositoryPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # Towns

    def add_town(self, name: str) -> bool:
        return self.graph.add_vertex(Town(name))

    def get_town(self, name: str) -> Optional[Town]:
        return self.graph.get_vertex(name)

    def contains_town(self, name: str) -> bool:
        return self.graph.contains_vertex(Town(name))

    def delete_town(self, name: str) -> bool:
        return self.graph.remove_vertex(Town(name))

    def all_towns(self) -> List[str]:
        """Return every town name in ascending order."""
        return sorted(town.name for town in self.graph.vertex_set())

    # Roads

    def add_road(self, town1: str, town2: str, weight: int, road_name: str) -> bool:
        """Add a road, creating either town if needed.

        Returns:
            True if the road was added, False if the towns were already connected.
        """
        source, destination = Town(town1), Town(town2)
        # reject a bad weight before any town is added
        Road(source, destination, weight, road_name)
        self.graph.add_vertex(source)
        self.graph.add_vertex(destination)
        return self.graph.add_edge(source, destination, weight, road_name) is not None

    def get_road(self, town1: str, town2: str) -> Optional[str]:
        """Return the name of the road joining two towns, or None."""
        road = self.graph.get_edge(Town(town1), Town(town2))
        return road.name if road is not None else None

    def contains_road_connection(self, town1: str, town2: str) -> bool:
        return self.graph.contains_edge(Town(town1), Town(town2))

    def delete_road_connection(self, town1: str, town2: str, road_name: str) -> bool:
        """Delete the road called ``road_name`` between two towns.

        Returns:
            True if a road was removed.
        """
        source, destination = Town(town1), Town(town2)
        road = self.graph.get_edge(source, destination)
        if road is None:
            return False
        return self.graph.remove_edge(source, destination, road.weight, road_name) is not None

    def all_roads(self) -> List[str]:
        """Return every road name in ascending order."""
        return sorted(road.name for road in self.graph.edge_set())

    # Paths

    def get_route(self, town1: str, town2: str) -> RouteResult:
        """Return the shortest route between two towns.

        Both towns must be in the graph and have at least one road;
        otherwise an empty result is returned without running Dijkstra.
        """
        source, destination = Town(town1), Town(town2)
        if not self._routable(source) or not self._routable(destination):
            self._logger.warning(
                "Route query skipped",
                extra={"departure": town1, "arrival": town2},
            )
            return RouteResult(path=(), total_distance=INFINITY)
        return self.route_solver.solve_safe(self.graph, source, destination)

    def get_path(self, town1: str, town2: str) -> List[str]:
        """Return the shortest path as ``"A via Road to B 5 mi"`` strings.

        An empty list means there is no path.
        """
        return self.get_route(town1, town2).descriptions()

    def _routable(self, town: Town) -> bool:
        return self.graph.contains_vertex(town) and bool(self.graph.edges_of(town))

    # Import

    def import_records(self, records: Iterable[RoadRecord]) -> int:
        """Apply road records to the graph.

        Missing towns are created; a record for an already connected pair
        of towns is ignored, so the first road between two towns wins.

        Returns:
            Number of roads added.
        """
        added = 0
        skipped = 0
        for record in records:
            source, destination = Town(record.source), Town(record.destination)
            self.graph.add_vertex(source)
            self.graph.add_vertex(destination)
            if self.graph.contains_edge(source, destination):
                skipped += 1
                continue
            self.graph.add_edge(source, destination, record.weight, record.name)
            added += 1

        self._logger.info(
            "Roads imported",
            extra={"added": added, "skipped": skipped, "towns": len(self.graph)},
        )
        return added

    def populate_town_graph(self, path: Optional[Union[str, Path]] = None) -> int:
        """Populate the graph from a road file.

        Args:
            path: File to read. Defaults to the configured road repository.

        Returns:
            Number of roads added.

        Raises:
            ConfigurationError: If no path is given and no repository is set.
            RoadImportError: If the file cannot be read or parsed.
        """
        if path is not None:
            repository: RoadRepositoryPort = TextRoadRepository(path=Path(path))
        elif self.road_repository is not None:
            repository = self.road_repository
        else:
            raise ConfigurationError(
                "No road file given and no road repository configured",
                setting_name="road_repository",
            )
        return self.import_records(repository.load())
