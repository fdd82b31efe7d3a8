from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from riskmap.config import settings
from riskmap.core.geodesy import distance_km
from riskmap.models.geo import GeoPoint

@dataclass(frozen=True)
class RouteEstimate:
    """Straight-line route between two points, recomputed on demand"""
    distance_km: float
    duration_min: float
    path: List[GeoPoint]

    def to_dict(self) -> Dict:
        return {
            "distance_km": self.distance_km,
            "duration_min": self.duration_min,
            "path": [point.as_tuple() for point in self.path]
        }

def estimate_route(
    origin: GeoPoint,
    destination: GeoPoint,
    waypoints: Optional[Sequence[GeoPoint]] = None,
    speed_kmh: Optional[float] = None
) -> RouteEstimate:
    """
    Estimate distance and travel time without a road network
    Args:
        origin: Route starting point
        destination: Route destination
        waypoints: Optional intermediate points, visited in order
        speed_kmh: Average speed (default AVERAGE_URBAN_SPEED_KMH, 40 km/h)
    """
    if speed_kmh is None:
        speed_kmh = settings.AVERAGE_URBAN_SPEED_KMH

    path = [origin, *(waypoints or []), destination]

    total_distance = 0.0
    for start, end in zip(path, path[1:]):
        total_distance += distance_km(start, end)

    duration = (total_distance / speed_kmh) * 60 if speed_kmh > 0 else 0.0

    return RouteEstimate(distance_km=total_distance, duration_min=duration, path=path)
