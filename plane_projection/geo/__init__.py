"""Geographic coordinates and the plane projection.

Components:
    GeoPoint: Typed (latitude, longitude) point with the exact WGS84 geodesic
    Latitude / Longitude: Separate degree units so the axes cannot be swapped
    PlaneProjection: Tangent-plane approximation for fast distance and heading
    PlanarPoint / LinePoint: Results of projection and segment queries

Typical Usage:
    >>> from plane_projection.geo import GeoPoint, PlaneProjection
    >>> proj = PlaneProjection(55.65)
    >>> lund = GeoPoint.from_deg(55.7041417, 13.1913041)
    >>> malmo = (55.6033090, 13.0019737)  # plain tuples are (lat, lon)
    >>> int(proj.distance(lund, malmo))
    16373
"""

from .geo_point import GeoPoint, LatLon, Latitude, Longitude, as_lat_lon, geodesic_distance
from .projection import (
    LinePoint,
    PlanarPoint,
    PlaneProjection,
    lat_degree_length,
    lon_degree_length,
    lon_diff,
)

__all__ = [
    "GeoPoint",
    "Latitude",
    "Longitude",
    "LatLon",
    "as_lat_lon",
    "geodesic_distance",
    "PlaneProjection",
    "PlanarPoint",
    "LinePoint",
    "lat_degree_length",
    "lon_degree_length",
    "lon_diff",
]
