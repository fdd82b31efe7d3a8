import logging
from typing import Dict, Iterable, List, Sequence

from riskmap.core.classifier import is_high_priority
from riskmap.models.emergency import (
    EmergencyZone,
    EmergencyIncident,
    ZoneMetrics,
    EmergencyStats
)
from riskmap.models.facility import MedicalCenter

logger = logging.getLogger(__name__)

def _category_key(value) -> str:
    return getattr(value, "value", value)

def average_response_time(incidents: Iterable[EmergencyIncident]) -> float:
    """
    Mean response time over resolved incidents that report one.
    Rounded to one decimal, 0.0 when no incident qualifies.
    """
    times = [
        incident.response_time
        for incident in incidents
        if incident.resolved and incident.response_time is not None
    ]
    if not times:
        return 0.0
    return round(sum(times) / len(times), 1)

def incidents_by_severity(incidents: Iterable[EmergencyIncident]) -> Dict[str, int]:
    distribution: Dict[str, int] = {}
    for incident in incidents:
        key = _category_key(incident.severity)
        distribution[key] = distribution.get(key, 0) + 1
    return distribution

def incidents_by_type(incidents: Iterable[EmergencyIncident]) -> Dict[str, int]:
    distribution: Dict[str, int] = {}
    for incident in incidents:
        key = _category_key(incident.incident_type)
        distribution[key] = distribution.get(key, 0) + 1
    return distribution

def incidents_for_zone(
    zone: EmergencyZone,
    incidents: Iterable[EmergencyIncident]
) -> List[EmergencyIncident]:
    return [incident for incident in incidents if incident.zone_id == zone.id]

def calculate_zone_metrics(
    zone: EmergencyZone,
    incidents: Iterable[EmergencyIncident]
) -> ZoneMetrics:
    """Incident counts, response time and severity mix scoped to one zone"""
    zone_incidents = incidents_for_zone(zone, incidents)

    active = sum(1 for incident in zone_incidents if not incident.resolved)
    resolved = len(zone_incidents) - active

    return ZoneMetrics(
        active_incidents=active,
        resolved_incidents=resolved,
        average_response_time=average_response_time(zone_incidents),
        severity_distribution=incidents_by_severity(zone_incidents)
    )

def calculate_emergency_stats(
    zones: Sequence[EmergencyZone],
    incidents: Sequence[EmergencyIncident],
    centers: Sequence[MedicalCenter]
) -> EmergencyStats:
    """Dashboard-wide totals across every zone and facility"""
    stats = EmergencyStats(
        total_incidents=len(incidents),
        total_resolved=sum(1 for incident in incidents if incident.resolved),
        average_response_time=average_response_time(incidents),
        critical_zones=sum(1 for zone in zones if is_high_priority(zone.risk_level)),
        hospitals_with_emergency=sum(1 for center in centers if center.emergency)
    )

    logger.debug(
        f"Emergency stats: {stats.total_incidents} incidents, "
        f"{stats.critical_zones} high/critical zones"
    )
    return stats
