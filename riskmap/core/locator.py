import logging
from typing import List, Optional, Sequence, Tuple

from riskmap.config import settings
from riskmap.core.geodesy import distance_km
from riskmap.models.geo import GeoPoint
from riskmap.models.facility import MedicalCenter, FacilityType
from riskmap.models.emergency import EmergencyZone

logger = logging.getLogger(__name__)

def nearest(query: Optional[GeoPoint], candidates: Sequence[GeoPoint]) -> Optional[int]:
    """
    Index of the candidate closest to the query point.

    Ties resolve to the earliest candidate. Returns None when there is no
    query point or nothing to compare against.
    """
    if query is None or not candidates:
        logger.debug("Nearest search skipped: no query point or empty candidate set")
        return None

    nearest_index = 0
    min_distance = float('inf')

    for index, candidate in enumerate(candidates):
        distance = distance_km(query, candidate)
        if distance < min_distance:
            min_distance = distance
            nearest_index = index

    return nearest_index

def nearest_center(
    user: Optional[GeoPoint],
    centers: Sequence[MedicalCenter]
) -> Optional[MedicalCenter]:
    """Closest medical center to the user, used as the default route target"""
    index = nearest(user, [center.location for center in centers])
    return centers[index] if index is not None else None

def nearest_emergency_zone(
    user: Optional[GeoPoint],
    zones: Sequence[EmergencyZone]
) -> Optional[EmergencyZone]:
    """Emergency zone whose center is closest to the user"""
    index = nearest(user, [zone.location for zone in zones])
    return zones[index] if index is not None else None

def nearest_hospitals_to_zone(
    zone: EmergencyZone,
    centers: Sequence[MedicalCenter],
    limit: Optional[int] = None
) -> List[Tuple[MedicalCenter, float]]:
    """
    Hospitals closest to a zone center
    Args:
        zone: Emergency zone to measure from
        centers: Facilities to consider, only hospitals are kept
        limit: Maximum results (default NEAREST_HOSPITALS_LIMIT)
    Returns:
        (center, distance_km) pairs sorted by distance
    """
    if limit is None:
        limit = settings.NEAREST_HOSPITALS_LIMIT

    hospitals = [
        (center, distance_km(zone.location, center.location))
        for center in centers
        if center.type == FacilityType.HOSPITAL
    ]

    # sort is stable, equidistant hospitals keep input order
    hospitals.sort(key=lambda pair: pair[1])
    return hospitals[:limit]

def centers_covering(
    point: GeoPoint,
    centers: Sequence[MedicalCenter],
    radius_m: Optional[float] = None
) -> List[Tuple[MedicalCenter, float]]:
    """
    Facilities whose coverage circle contains the point
    Args:
        point: Location to test
        centers: Facilities to consider
        radius_m: Coverage radius in meters (default COVERAGE_RADIUS_M)
    Returns:
        (center, distance_km) pairs, nearest first
    """
    if radius_m is None:
        radius_m = settings.COVERAGE_RADIUS_M

    covering = []
    for center in centers:
        distance = distance_km(point, center.location)
        if distance * 1000 <= radius_m:
            covering.append((center, distance))

    covering.sort(key=lambda pair: pair[1])
    return covering
