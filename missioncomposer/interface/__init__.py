"""Mini README: Interactive interfaces for the mission composer.

Exports the FastAPI application factory that serves the waypoint dashboard
and the draw session endpoints consumed by the map client.
"""

from .web_app import create_application

__all__ = ["create_application"]
