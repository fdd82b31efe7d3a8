"""
Zone boundary synthesis.

A zone is drawn either from a hand-authored boundary (known districts whose
real shape a circle would misrepresent) or from an irregular polygon
generated from its center, radius and name. Generation is seeded only by the
name, so the same zone always renders the same shape.
"""

import math
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from riskmap.models.geo import GeoPoint, Ring
from riskmap.models.emergency import EmergencyZone

logger = logging.getLogger(__name__)

METERS_PER_DEGREE = 111000  # 1 degree ~ 111 km

MIN_POINTS = 8
MAX_POINTS = 12
RADIUS_VARIATION_MIN = 0.7
RADIUS_VARIATION_SPAN = 0.6    # factor in [0.7, 1.3]
ANGLE_VARIATION_SPAN = 0.3     # +/- 0.15 rad

# Linear congruential parameters
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# Draw index reserved for the vertex count, past every per-vertex draw
POINT_COUNT_DRAW = 2 * MAX_POINTS

MIN_LNG_SCALE = 1e-6  # keeps polar rings finite

# Hand-authored boundaries keyed by exact zone name
KNOWN_ZONE_POLYGONS: Dict[str, List[Tuple[float, float]]] = {
    "Centro Histórico San Salvador": [
        (13.7050, -89.2250),
        (13.7080, -89.2100),
        (13.6950, -89.2050),
        (13.6900, -89.2150),
        (13.6850, -89.2200),
        (13.6880, -89.2280),
        (13.6950, -89.2300),
        (13.7020, -89.2280),
        (13.7050, -89.2250),
    ],
    "Soyapango Norte": [
        (13.7550, -89.1500),
        (13.7580, -89.1300),
        (13.7450, -89.1250),
        (13.7350, -89.1300),
        (13.7300, -89.1400),
        (13.7280, -89.1500),
        (13.7320, -89.1580),
        (13.7400, -89.1600),
        (13.7480, -89.1580),
        (13.7550, -89.1500),
    ],
    "Mejicanos Centro": [
        (13.7500, -89.2250),
        (13.7520, -89.2100),
        (13.7450, -89.2050),
        (13.7380, -89.2080),
        (13.7320, -89.2150),
        (13.7300, -89.2220),
        (13.7350, -89.2280),
        (13.7420, -89.2300),
        (13.7480, -89.2280),
        (13.7500, -89.2250),
    ],
    "Santa Ana Centro": [
        (14.0050, -89.5700),
        (14.0080, -89.5500),
        (13.9950, -89.5450),
        (13.9850, -89.5500),
        (13.9800, -89.5600),
        (13.9820, -89.5700),
        (13.9880, -89.5750),
        (13.9950, -89.5750),
        (14.0020, -89.5720),
        (14.0050, -89.5700),
    ],
    # Rural zone, wider and more irregular
    "Chalatenango Rural": [
        (14.0800, -89.0000),
        (14.0900, -88.9000),
        (14.0500, -88.8500),
        (14.0200, -88.8800),
        (13.9800, -88.9200),
        (13.9900, -88.9800),
        (14.0100, -89.0200),
        (14.0400, -89.0100),
        (14.0650, -89.0050),
        (14.0800, -89.0000),
    ],
}

class ShapeKind(str, Enum):
    KNOWN = "known"
    GENERATED = "generated"

@dataclass(frozen=True)
class ZoneShape:
    kind: ShapeKind
    ring: Ring

def name_seed(zone_name: str) -> int:
    """Sum of the character codes of a zone name"""
    return sum(ord(char) for char in zone_name)

def seeded_unit(seed: int, index: int) -> float:
    """Deterministic pseudo-random value in [0, 1) for draw number `index`"""
    return ((seed * (index + 1) * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS) / LCG_MODULUS

def polygon_point_count(seed: int) -> int:
    span = MAX_POINTS - MIN_POINTS + 1
    return MIN_POINTS + int(seeded_unit(seed, POINT_COUNT_DRAW) * span)

def generate_irregular_polygon(
    center_lat: float,
    center_lng: float,
    base_radius: float,
    zone_name: str
) -> Ring:
    """
    Irregular closed ring around a center
    Args:
        center_lat: Center latitude
        center_lng: Center longitude
        base_radius: Nominal radius in meters, <= 0 collapses onto the center
        zone_name: Seeds the vertex count and every perturbation
    """
    seed = name_seed(zone_name)
    num_points = polygon_point_count(seed)
    radius = max(base_radius, 0)

    points: Ring = []
    for i in range(num_points):
        angle = (i / num_points) * 2 * math.pi

        radius_variation = RADIUS_VARIATION_MIN + seeded_unit(seed, i) * RADIUS_VARIATION_SPAN
        current_radius = radius * radius_variation

        angle_variation = (seeded_unit(seed, i + num_points) - 0.5) * ANGLE_VARIATION_SPAN
        current_angle = angle + angle_variation

        radius_in_degrees = current_radius / METERS_PER_DEGREE

        lat = center_lat + radius_in_degrees * math.cos(current_angle)
        lng = center_lng + radius_in_degrees * math.sin(current_angle)
        points.append((lat, lng))

    # Close the ring
    points.append(points[0])
    return points

def resolve_zone_shape(zone: EmergencyZone) -> ZoneShape:
    """Pick the hand-authored boundary for a known zone, otherwise generate one"""
    known = KNOWN_ZONE_POLYGONS.get(zone.name)
    if known is not None:
        logger.debug(f"Using known boundary for zone '{zone.name}'")
        return ZoneShape(ShapeKind.KNOWN, list(known))

    ring = generate_irregular_polygon(zone.latitude, zone.longitude, zone.radius, zone.name)
    return ZoneShape(ShapeKind.GENERATED, ring)

def zone_polygon(zone: EmergencyZone) -> Ring:
    return resolve_zone_shape(zone).ring

def coverage_ring(center: GeoPoint, radius_m: float, num_points: int = 32) -> Ring:
    """
    Regular closed ring approximating a coverage circle.
    Longitude offsets are widened by 1/cos(lat) so the ring stays round on the map.
    """
    radius_in_degrees = max(radius_m, 0) / METERS_PER_DEGREE
    lng_scale = max(math.cos(math.radians(center.latitude)), MIN_LNG_SCALE)

    points: Ring = []
    for i in range(num_points):
        angle = (i / num_points) * 2 * math.pi
        points.append((
            center.latitude + radius_in_degrees * math.cos(angle),
            center.longitude + radius_in_degrees * math.sin(angle) / lng_scale,
        ))

    points.append(points[0])
    return points
