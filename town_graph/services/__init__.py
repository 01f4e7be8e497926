"""Services layer - Application orchestration.

Available services:
- TownGraphManager: Name-keyed facade for building and querying town graphs
"""

from .town_graph_manager import TownGraphManager

__all__ = ["TownGraphManager"]
