"""
Basic example of fast distance, heading and segment queries.
"""

from plane_projection import GeoPoint, PlaneProjection
from plane_projection.unit import Kilometer


def main():
    print("=" * 80)
    print("Plane Projection - Basic Example")
    print("=" * 80)

    lund = GeoPoint.from_deg(55.7041417, 13.1913041)
    malmo = (55.6033090, 13.0019737)  # plain tuples are (lat, lon)
    between = (55.6781798, 13.0587896)

    proj = PlaneProjection(55.65)
    print(f"\nProjection: {proj!r}")
    print(f"One degree of latitude:  {proj.lat_scale:.3f} m")
    print(f"One degree of longitude: {proj.lon_scale:.3f} m")

    print("\n" + "-" * 80)
    print(f"Lund -> Malmo distance:  {proj.distance(lund, malmo):.1f} m")
    print(f"Lund -> Malmo heading:   {proj.heading(lund, malmo):.1f}°")
    print(f"Malmo -> Lund heading:   {proj.heading(malmo, lund):.1f}°")
    print(f"Exact geodesic:          {float(lund.distance_to(GeoPoint.from_deg(*malmo))):.1f} m")
    print(f"Relative error:          {proj.relative_error(lund, malmo):.2e}")

    print("\n" + "-" * 80)
    nearest = proj.point_on_line(between, (lund, malmo))
    print(f"Distance to Lund-Malmo line: {proj.distance_to_segment(between, (lund, malmo)):.1f} m")
    print(f"Nearest point: {nearest.point[0]:.6f}, {nearest.point[1]:.6f} (t = {nearest.t:.3f})")

    print("\n" + "-" * 80)
    km = PlaneProjection(55.65, unit=Kilometer)
    print(f"Lund -> Malmo distance:  {km.distance(lund, malmo):.3f} km")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
