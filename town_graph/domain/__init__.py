"""Domain layer - Core value types and errors.

This module contains the town and road value types, query results and
typed errors used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InvalidInputError,
    NoRouteFoundError,
    RoadImportError,
    TownGraphError,
    UnknownTownError,
)
from .models import PathHop, Road, RoadRecord, RouteResult, Town

__all__ = [
    # Models
    "Town",
    "Road",
    "RoadRecord",
    "PathHop",
    "RouteResult",
    # Errors
    "TownGraphError",
    "InvalidInputError",
    "UnknownTownError",
    "RoadImportError",
    "NoRouteFoundError",
    "ConfigurationError",
]
