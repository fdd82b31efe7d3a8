from sqlmodel import SQLModel, Field
from pydantic import model_validator, field_validator
from datetime import datetime, timezone
from typing import Optional, List, Dict, Union
from enum import Enum

from riskmap.models.geo import GeoPoint
from riskmap.models.categories import coerce_category

class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class IncidentType(str, Enum):
    MEDICAL = "medical"
    ACCIDENT = "accident"
    CARDIAC = "cardiac"
    RESPIRATORY = "respiratory"
    TRAUMA = "trauma"
    OTHER = "other"

class EmergencyZoneBase(SQLModel):
    name: str
    municipality: str = ""
    department: str = ""
    latitude: float
    longitude: float
    radius: float  # meters
    population: int = 0
    emergency_rate: float = 0.0  # incidents per 1000 inhabitants
    risk_level: Union[RiskLevel, str]
    nearest_hospitals: List[str] = Field(default_factory=list)
    average_response_time: float = 0.0  # minutes
    monthly_incidents: int = 0
    yearly_incidents: int = 0
    active: bool = True

    @field_validator("risk_level", mode="before")
    @classmethod
    def keep_known_risk_level(cls, value):
        return coerce_category(RiskLevel, value)

class EmergencyZone(EmergencyZoneBase):
    id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

class EmergencyIncidentBase(SQLModel):
    incident_type: Union[IncidentType, str]
    severity: Union[Severity, str]
    latitude: float
    longitude: float
    zone_id: str
    hospital_id: Optional[str] = None
    response_time: Optional[float] = None  # minutes, only once resolved
    resolved: bool = False
    description: Optional[str] = None

    @field_validator("incident_type", mode="before")
    @classmethod
    def keep_known_incident_type(cls, value):
        return coerce_category(IncidentType, value)

    @field_validator("severity", mode="before")
    @classmethod
    def keep_known_severity(cls, value):
        return coerce_category(Severity, value)

class EmergencyIncident(EmergencyIncidentBase):
    id: str
    reported_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    resolved_at: Optional[datetime] = None

    @model_validator(mode='after')
    def check_resolution(self):
        if not self.resolved:
            if self.response_time is not None or self.resolved_at is not None:
                raise ValueError("Unresolved incidents cannot carry 'response_time' or 'resolved_at'")
        return self

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

class ZoneMetrics(SQLModel):
    active_incidents: int = 0
    resolved_incidents: int = 0
    average_response_time: float = 0.0
    severity_distribution: Dict[str, int] = Field(default_factory=dict)

class EmergencyStats(SQLModel):
    total_incidents: int = 0
    total_resolved: int = 0
    average_response_time: float = 0.0
    critical_zones: int = 0
    hospitals_with_emergency: int = 0
    last_update: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
