"""WGS84 constants and the accuracy envelope of the plane approximation.

WGS84 Ellipsoid:
    EQUATORIAL_RADIUS and FLATTENING define the ellipsoid. The exact geodesic
    reference (pyproj) is built from them.

Degree-Length Series:
    Length of one degree of latitude and longitude on the WGS84 ellipsoid as
    a Fourier series in the latitude:

        lat: 111132.92 - 559.82 cos 2φ + 1.175 cos 4φ - 0.0023 cos 6φ
        lon: 111412.84 cos φ - 93.5 cos 3φ + 0.118 cos 5φ

    Both give meters per degree.

Precision Envelope:
    Within PRECISION_MAX_DISTANCE and PRECISION_MAX_LATITUDE the plane
    approximation stays within PRECISION_RELATIVE_ERROR of the geodesic.
"""

EQUATORIAL_RADIUS = 6378137.0
FLATTENING = 1.0 / 298.257223563

# (constant, cos 2φ, cos 4φ, cos 6φ)
LAT_DEGREE_COEFFICIENTS = (111132.92, -559.82, 1.175, -0.0023)
# (cos φ, cos 3φ, cos 5φ)
LON_DEGREE_COEFFICIENTS = (111412.84, -93.5, 0.118)

PRECISION_MAX_DISTANCE = 500_000.0  # meters
PRECISION_MAX_LATITUDE = 65.0  # degrees
PRECISION_RELATIVE_ERROR = 0.001
