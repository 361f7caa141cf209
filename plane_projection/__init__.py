"""Fast approximate geodesy on a plane tangent to the WGS84 ellipsoid.

Distances, headings and point-to-segment queries computed on the Earth's
surface with plain Euclidean geometry. Latitude and longitude degrees are
scaled by the local length of a degree at a reference latitude, which keeps
the error under 0.1% for distances below 500 km at latitudes up to 65°.

Package Layout:
    plane_projection.geo:
        • PlaneProjection: distance, distance_sq, heading, distance_to_segment,
          point_on_line, offset, destination and their batch forms
        • GeoPoint, Latitude, Longitude: typed coordinates
        • geodesic_distance: exact WGS84 reference (pyproj)

    plane_projection.unit:
        • Meter, Kilometer, Mile, NauticalMile, Foot: output unit selector
        • Degree, Radian: angular units

    plane_projection.config:
        • WGS84 constants, degree-length coefficients, precision envelope

Coordinate Order:
    Coordinates are (latitude, longitude) in degrees everywhere, as tuples or
    ``GeoPoint`` values.

Example:
    >>> from plane_projection import PlaneProjection
    >>> from plane_projection.unit import Kilometer
    >>> proj = PlaneProjection(55.65)
    >>> lund, malmo = (55.7041417, 13.1913041), (55.6033090, 13.0019737)
    >>> int(proj.distance(lund, malmo))
    16373
    >>> int(proj.heading(malmo, lund))
    46
    >>> km = PlaneProjection(55.65, unit=Kilometer)
    >>> round(km.distance(lund, malmo), 1)
    16.4

Thread Safety:
    Projections are immutable after construction; share them freely.
"""

from plane_projection.geo import GeoPoint, LinePoint, PlanarPoint, PlaneProjection

__version__ = "0.1.0"

__all__ = ["PlaneProjection", "GeoPoint", "PlanarPoint", "LinePoint"]
