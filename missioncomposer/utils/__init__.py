"""Mini README: Utility helpers for the mission composer.

Exports GeoJSON builders shared by the projector and the web interface.
"""

from .geojson import coordinates_from_geojson, feature_collection, line_feature, polygon_feature

__all__ = ["coordinates_from_geojson", "feature_collection", "line_feature", "polygon_feature"]
