import math
from typing import Tuple, Dict, Any, Sequence

from riskmap.models.geo import GeoPoint

EARTH_RADIUS_KM = 6371.0

def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate distance between two points using Haversine formula
    Returns distance in kilometers
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    a = min(a, 1.0)  # rounding near antipodes
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c

def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers"""
    return calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)

def is_within_radius(point: GeoPoint, center: GeoPoint, radius_m: float) -> bool:
    """Check if a point falls inside a circle given in meters"""
    return distance_km(point, center) * 1000 <= radius_m

def validate_coordinates(latitude: float, longitude: float) -> Dict[str, Any]:
    """
    Range check for coordinates coming from a user-location provider.
    The distance and polygon helpers never call this themselves.
    """
    result: Dict[str, Any] = {
        "valid": False,
        "errors": []
    }

    if not (-90 <= latitude <= 90):
        result["errors"].append("Invalid latitude: must be between -90 and 90")

    if not (-180 <= longitude <= 180):
        result["errors"].append("Invalid longitude: must be between -180 and 180")

    result["valid"] = not result["errors"]
    return result

def point_in_polygon(point: GeoPoint, polygon: Sequence[Tuple[float, float]]) -> bool:
    """
    Even-odd ray casting test.
    Rings with fewer than 3 vertices contain nothing.
    """
    n = len(polygon)
    if n < 3:
        return False

    lat, lng = point.latitude, point.longitude
    inside = False

    j = n - 1
    for i in range(n):
        lat_i, lng_i = polygon[i]
        lat_j, lng_j = polygon[j]
        if (lng_i > lng) != (lng_j > lng):
            lat_cross = (lat_j - lat_i) * (lng - lng_i) / (lng_j - lng_i) + lat_i
            if lat < lat_cross:
                inside = not inside
        j = i

    return inside

def calculate_polygon_area(polygon: Sequence[Tuple[float, float]]) -> float:
    """
    Approximate area of a ring in square kilometers.

    Sums longitude deltas weighted by the sines of the edge latitudes and
    scales by the Earth radius squared. Good enough for display, not for
    surveying.
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    for i in range(len(polygon) - 1):
        lat1, lng1 = polygon[i]
        lat2, lng2 = polygon[i + 1]

        delta_lng = math.radians(lng2 - lng1)
        area += delta_lng * (2 + math.sin(math.radians(lat1)) + math.sin(math.radians(lat2)))

    return abs(area * EARTH_RADIUS_KM * EARTH_RADIUS_KM / 2)

def ring_bounds(polygon: Sequence[Tuple[float, float]]) -> Tuple[float, float, float, float]:
    """Return (min_lat, min_lng, max_lat, max_lng) of a ring"""
    lats = [lat for lat, _ in polygon]
    lngs = [lng for _, lng in polygon]
    return (min(lats), min(lngs), max(lats), max(lngs))
