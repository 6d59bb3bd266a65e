"""Mini README: Core package initializer for the mission composer.

Exposes the logger factory so scripts can obtain configured loggers without
knowing the module layout. Route composition lives in ``route_planning``,
geodesic helpers in ``geodesy`` and draw session handling in ``capture``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
