"""In-memory town graph and the shortest-path engine that runs on it."""

from .dijkstra import PredecessorMap, ShortestPathEngine
from .graph import ANY_WEIGHT, Graph, road_key

__all__ = ["ANY_WEIGHT", "Graph", "PredecessorMap", "ShortestPathEngine", "road_key"]
