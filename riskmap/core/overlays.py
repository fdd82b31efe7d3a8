"""
Display-ready payloads for one render pass.

Combines geometry, classification, metrics and formatting into plain dicts
the map layer can draw without further computation.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from riskmap.config import settings
from riskmap.core.classifier import (
    risk_color,
    risk_label,
    density_color,
    density_label,
    facility_color,
    facility_icon,
    infrastructure_label
)
from riskmap.core.geodesy import ring_bounds
from riskmap.core.locator import nearest_center
from riskmap.core.metrics import calculate_zone_metrics
from riskmap.core.polygons import resolve_zone_shape, coverage_ring
from riskmap.core.routing import estimate_route
from riskmap.models.emergency import EmergencyZone, EmergencyIncident, RiskLevel
from riskmap.models.facility import MedicalCenter
from riskmap.models.geo import GeoPoint
from riskmap.models.population import PopulationZone, DensityLevel
from riskmap.utils.formatting import (
    format_distance,
    format_duration,
    format_emergency_rate,
    format_response_time,
    format_density,
    format_population
)

logger = logging.getLogger(__name__)

DASHED_BORDER = "10, 5"
DASHED_DENSITY_BORDER = "8, 4"

def build_zone_overlay(
    zone: EmergencyZone,
    incidents: Sequence[EmergencyIncident]
) -> Dict[str, Any]:
    """Polygon, color and popup content for one emergency zone"""
    shape = resolve_zone_shape(zone)
    metrics = calculate_zone_metrics(zone, incidents)

    return {
        "zone_id": zone.id,
        "name": zone.name,
        "color": risk_color(zone.risk_level),
        "risk_label": risk_label(zone.risk_level),
        "shape_kind": shape.kind.value,
        "ring": shape.ring,
        "dash_array": DASHED_BORDER if zone.risk_level == RiskLevel.CRITICAL else None,
        "metrics": metrics.model_dump(),
        "popup": {
            "emergency_rate": format_emergency_rate(zone.emergency_rate),
            "response_time": format_response_time(zone.average_response_time),
            "population": format_population(zone.population),
            "municipality": f"{zone.municipality}, {zone.department}",
            "nearest_hospitals": len(zone.nearest_hospitals)
        }
    }

def build_population_overlay(zone: PopulationZone) -> Dict[str, Any]:
    """Circle, color and popup content for one population density zone"""
    return {
        "zone_id": zone.id,
        "name": zone.name,
        "center": zone.location.as_tuple(),
        "radius": zone.radius,
        "color": density_color(zone.density_level),
        "density_label": density_label(zone.density_level),
        "dash_array": DASHED_DENSITY_BORDER if zone.density_level == DensityLevel.VERY_HIGH else None,
        "popup": {
            "density": format_density(zone.population_density),
            "population": format_population(zone.population),
            "infrastructure": infrastructure_label(zone.infrastructure_level),
            "urban_percentage": zone.urban_percentage,
            "rural_percentage": zone.rural_percentage,
            "economic_activity": list(zone.economic_activity)
        }
    }

def build_coverage_overlay(center: MedicalCenter, radius_m: Optional[float] = None) -> Dict[str, Any]:
    """Coverage circle around one facility"""
    if radius_m is None:
        radius_m = settings.COVERAGE_RADIUS_M

    return {
        "center_id": center.id,
        "color": facility_color(center.type),
        "icon": facility_icon(center.type),
        "radius": radius_m,
        "ring": coverage_ring(center.location, radius_m)
    }

def build_route_overlay(
    user: Optional[GeoPoint],
    centers: Sequence[MedicalCenter],
    selected: Optional[MedicalCenter] = None
) -> Optional[Dict[str, Any]]:
    """
    Route panel for the selected facility, or the nearest one when nothing
    is selected. None without a user location or any facility.
    """
    if user is None:
        return None

    target = selected or nearest_center(user, centers)
    if target is None:
        logger.debug("No facility available for route overlay")
        return None

    route = estimate_route(user, target.location)

    return {
        "center_id": target.id,
        "center_name": target.name,
        "auto_selected": selected is None,
        "distance_km": route.distance_km,
        "duration_min": route.duration_min,
        "distance": format_distance(route.distance_km),
        "duration": format_duration(route.duration_min),
        "path": [point.as_tuple() for point in route.path],
        "bounds": ring_bounds([point.as_tuple() for point in route.path])
    }
