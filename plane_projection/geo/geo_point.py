"""Geographic coordinates and the exact WGS84 geodesic.

Latitude and longitude are separate unit families, so a latitude can never be
passed where a longitude is expected. ``GeoPoint`` bundles the two in
(latitude, longitude) order, the same order used by plain tuples throughout
the package.

The exact ellipsoidal distance computed here (through pyproj) is the reference
the plane approximation is measured against.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pyproj import Geod

from plane_projection.config import EQUATORIAL_RADIUS, FLATTENING
from plane_projection.unit import Degree, Meter

_WGS84 = Geod(a=EQUATORIAL_RADIUS, f=FLATTENING)

LatLon = tuple[float, float]


class Latitude(Degree):
    """Latitude in degrees, positive north.

    Stored in radians like every ``Degree``; use ``to(Latitude)`` or
    ``GeoPoint.lat_deg`` to read degrees back.

    Example:
        >>> lat = Latitude(55.65)
        >>> round(lat.to(Latitude), 6)
        55.65
        >>> str(lat)
        '55.65 °N/S'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, positive east."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True)
class GeoPoint:
    """A point on the WGS84 ellipsoid.

    Attributes:
        latitude (Latitude): North/south position.
        longitude (Longitude): East/west position.

    Example:
        >>> lund = GeoPoint.from_deg(55.7041417, 13.1913041)
        >>> malmo = GeoPoint.from_deg(55.6033090, 13.0019737)
        >>> f"{float(lund.distance_to(malmo)) / 1000:.1f} km"
        '16.4 km'
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from decimal degrees, latitude first."""
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from radians, latitude first."""
        return cls(Latitude.from_si(float(lat)), Longitude.from_si(float(lon)))

    @property
    def lat_deg(self) -> float:
        return self.latitude.to(Latitude)

    @property
    def lon_deg(self) -> float:
        return self.longitude.to(Longitude)

    def as_tuple(self) -> LatLon:
        """Return ``(lat, lon)`` in degrees."""
        return self.lat_deg, self.lon_deg

    def distance_to(self, other: GeoPoint) -> Meter:
        """Exact geodesic distance to ``other`` on the WGS84 ellipsoid.

        Args:
            other (GeoPoint): Target point.

        Returns:
            Meter: Length of the shortest path along the ellipsoid surface.
        """
        _, _, dist = _WGS84.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Meter(dist)


def as_lat_lon(point: GeoPoint | Sequence[float]) -> LatLon:
    """Normalize a coordinate to a ``(lat, lon)`` tuple of degrees.

    ``GeoPoint`` values are converted from their radian storage; any other
    two-item sequence is taken as degrees in (latitude, longitude) order.
    """
    if isinstance(point, GeoPoint):
        return point.as_tuple()
    lat, lon = point
    return float(lat), float(lon)


def geodesic_distance(a: GeoPoint | Sequence[float], b: GeoPoint | Sequence[float]) -> float:
    """Exact WGS84 distance in meters between two coordinates."""
    lat1, lon1 = as_lat_lon(a)
    lat2, lon2 = as_lat_lon(b)
    _, _, dist = _WGS84.inv(lon1, lat1, lon2, lat2)
    return dist
