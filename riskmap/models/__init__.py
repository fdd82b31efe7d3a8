"""
Record models consumed by the risk map core

Snapshots of facilities, emergency zones, incidents and population zones
handed over by the external data store, plus the value objects the core
returns. None of these are persisted here.
"""

from .geo import GeoPoint, Ring

from .facility import (
    FacilityType,
    MedicalCenterBase,
    MedicalCenter
)

from .emergency import (
    RiskLevel,
    Severity,
    IncidentType,
    EmergencyZone,
    EmergencyIncident,
    ZoneMetrics,
    EmergencyStats
)

from .population import (
    DensityLevel,
    InfrastructureLevel,
    AgeGroups,
    PopulationZone
)

from .location import (
    LocationAccuracy,
    UserLocation
)

__all__ = [
    # Geometry
    "GeoPoint",
    "Ring",

    # Facilities
    "FacilityType",
    "MedicalCenterBase",
    "MedicalCenter",

    # Emergency
    "RiskLevel",
    "Severity",
    "IncidentType",
    "EmergencyZone",
    "EmergencyIncident",
    "ZoneMetrics",
    "EmergencyStats",

    # Population
    "DensityLevel",
    "InfrastructureLevel",
    "AgeGroups",
    "PopulationZone",

    # User location
    "LocationAccuracy",
    "UserLocation"
]
