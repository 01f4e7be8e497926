"""Town graph: named towns joined by named, weighted roads.

The package provides the graph container, a Dijkstra shortest-path
engine and a name-keyed manager that imports road files and answers
route queries.
"""

from .domain import Road, RouteResult, Town
from .graph import Graph, ShortestPathEngine
from .services import TownGraphManager

__all__ = ["Graph", "Road", "RouteResult", "ShortestPathEngine", "Town", "TownGraphManager"]
