"""
Category classification and display palettes.

Every lookup here is total: values outside the known enums fall back to
the neutral gray / "unknown" entries instead of raising, so a render pass
never fails on an unexpected category.
"""

import logging
from typing import Any, Dict

from riskmap.models.emergency import RiskLevel, Severity, IncidentType
from riskmap.models.population import DensityLevel, InfrastructureLevel
from riskmap.models.facility import FacilityType

logger = logging.getLogger(__name__)

NEUTRAL_COLOR = "#6B7280"  # Gray
UNKNOWN_LABEL = "Desconocido"

# Emergency rate thresholds (incidents per 1000 inhabitants), highest first
RISK_RATE_THRESHOLDS = [
    (40, RiskLevel.CRITICAL),
    (30, RiskLevel.HIGH),
    (20, RiskLevel.MEDIUM),
]

RISK_COLORS: Dict[str, str] = {
    RiskLevel.LOW: "#10B981",       # Green
    RiskLevel.MEDIUM: "#F59E0B",    # Amber
    RiskLevel.HIGH: "#EF4444",      # Red
    RiskLevel.CRITICAL: "#7C2D12",  # Dark red
}

SEVERITY_COLORS: Dict[str, str] = {
    Severity.LOW: "#10B981",
    Severity.MEDIUM: "#F59E0B",
    Severity.HIGH: "#EF4444",
    Severity.CRITICAL: "#7C2D12",
}

# very_high shares the dark red of critical risk
DENSITY_COLORS: Dict[str, str] = {
    DensityLevel.VERY_LOW: "#3B82F6",   # Blue
    DensityLevel.LOW: "#10B981",
    DensityLevel.MEDIUM: "#F59E0B",
    DensityLevel.HIGH: "#EF4444",
    DensityLevel.VERY_HIGH: "#7C2D12",
}

FACILITY_COLORS: Dict[str, str] = {
    FacilityType.HOSPITAL: "#EF4444",
    FacilityType.CLINIC: "#3B82F6",
    FacilityType.HEALTH_CENTER: "#10B981",
}

RISK_LABELS: Dict[str, str] = {
    RiskLevel.LOW: "Bajo",
    RiskLevel.MEDIUM: "Medio",
    RiskLevel.HIGH: "Alto",
    RiskLevel.CRITICAL: "Crítico",
}

DENSITY_LABELS: Dict[str, str] = {
    DensityLevel.VERY_LOW: "Muy Baja",
    DensityLevel.LOW: "Baja",
    DensityLevel.MEDIUM: "Media",
    DensityLevel.HIGH: "Alta",
    DensityLevel.VERY_HIGH: "Muy Alta",
}

INFRASTRUCTURE_LABELS: Dict[str, str] = {
    InfrastructureLevel.BASIC: "Básica",
    InfrastructureLevel.INTERMEDIATE: "Intermedia",
    InfrastructureLevel.ADVANCED: "Avanzada",
}

FACILITY_ICONS: Dict[str, str] = {
    FacilityType.HOSPITAL: "🏨",
    FacilityType.CLINIC: "💉",
    FacilityType.HEALTH_CENTER: "🩺",
}
DEFAULT_FACILITY_ICON = "🏥"

INCIDENT_ICONS: Dict[str, str] = {
    IncidentType.CARDIAC: "💓",
    IncidentType.ACCIDENT: "🚗",
    IncidentType.RESPIRATORY: "🫁",
    IncidentType.TRAUMA: "🩹",
    IncidentType.MEDICAL: "🏥",
}
DEFAULT_INCIDENT_ICON = "🚨"

def _lookup(table: Dict[str, Any], value: Any, default: Any) -> Any:
    # str-mixin enum members hash like their values, so plain strings hit too
    try:
        found = table.get(value)
    except TypeError:
        found = None
    if found is None:
        logger.debug(f"Unclassified value {value!r}, using fallback {default!r}")
        return default
    return found

def risk_level_from_rate(emergency_rate: float) -> RiskLevel:
    """
    Classify a raw emergency rate.
    Advisory only: a zone's stored risk_level is never recomputed from this.
    """
    for threshold, level in RISK_RATE_THRESHOLDS:
        if emergency_rate >= threshold:
            return level
    return RiskLevel.LOW

def risk_color(risk_level: Any) -> str:
    return _lookup(RISK_COLORS, risk_level, NEUTRAL_COLOR)

def severity_color(severity: Any) -> str:
    return _lookup(SEVERITY_COLORS, severity, NEUTRAL_COLOR)

def density_color(density_level: Any) -> str:
    return _lookup(DENSITY_COLORS, density_level, NEUTRAL_COLOR)

def facility_color(facility_type: Any) -> str:
    return _lookup(FACILITY_COLORS, facility_type, NEUTRAL_COLOR)

def color_for(category: Any) -> str:
    """Display color for any risk, severity or density category"""
    color = risk_color(category)
    if color == NEUTRAL_COLOR:
        color = density_color(category)
    return color

def risk_label(risk_level: Any) -> str:
    return _lookup(RISK_LABELS, risk_level, UNKNOWN_LABEL)

def density_label(density_level: Any) -> str:
    return _lookup(DENSITY_LABELS, density_level, UNKNOWN_LABEL)

def infrastructure_label(infrastructure_level: Any) -> str:
    return _lookup(INFRASTRUCTURE_LABELS, infrastructure_level, UNKNOWN_LABEL)

def facility_icon(facility_type: Any) -> str:
    return _lookup(FACILITY_ICONS, facility_type, DEFAULT_FACILITY_ICON)

def incident_icon(incident_type: Any) -> str:
    return _lookup(INCIDENT_ICONS, incident_type, DEFAULT_INCIDENT_ICON)

def is_high_priority(risk_level: Any) -> bool:
    """High and critical zones count toward the critical-zone total"""
    return risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL)
