"""Even-odd ray casting point-in-polygon test."""

from collections.abc import Sequence


def point_in_ring(lat: float, lng: float, ring: Sequence[Sequence[float]]) -> bool:
    """Test whether a point lies inside a ring using the even-odd rule.

    A horizontal ray is cast from the query point and the ring edges it
    crosses are counted; an odd count means inside. The ring may be given
    closed (last vertex repeating the first) or open.

    Args:
        lat: Query latitude in degrees.
        lng: Query longitude in degrees.
        ring: Vertices as ``(longitude, latitude)`` pairs, GeoJSON order.

    Returns:
        True if the point is inside the ring.
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        lng_i, lat_i = ring[i][0], ring[i][1]
        lng_j, lat_j = ring[j][0], ring[j][1]
        if (lng_i > lng) != (lng_j > lng):
            crossing_lat = (lat_j - lat_i) * (lng - lng_i) / (lng_j - lng_i) + lat_i
            if lat < crossing_lat:
                inside = not inside
        j = i
    return inside
