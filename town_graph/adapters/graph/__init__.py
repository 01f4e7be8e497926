"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextRoadRepository: Loads road records from a delimited text file
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .text_repository import TextRoadRepository, parse_road_record

__all__ = ["DijkstraRouteSolver", "TextRoadRepository", "parse_road_record"]
