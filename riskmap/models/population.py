from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import List, Union
from enum import Enum
from pydantic import field_validator

from riskmap.models.geo import GeoPoint
from riskmap.models.categories import coerce_category

class DensityLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"

class InfrastructureLevel(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

class AgeGroups(SQLModel):
    children: int = 0
    adults: int = 0
    elderly: int = 0

    @property
    def total(self) -> int:
        return self.children + self.adults + self.elderly

class PopulationZoneBase(SQLModel):
    name: str
    municipality: str = ""
    department: str = ""
    latitude: float
    longitude: float
    radius: float  # meters
    population: int = 0
    population_density: float = 0.0  # people per km2
    density_level: Union[DensityLevel, str]
    area_km2: float = 0.0
    urban_percentage: float = 0.0
    rural_percentage: float = 0.0  # urban + rural ~ 100, not enforced
    growth_rate: float = 0.0
    age_groups: AgeGroups = Field(default_factory=AgeGroups)
    economic_activity: List[str] = Field(default_factory=list)
    infrastructure_level: Union[InfrastructureLevel, str] = InfrastructureLevel.BASIC
    active: bool = True

    @field_validator("density_level", mode="before")
    @classmethod
    def keep_known_density_level(cls, value):
        return coerce_category(DensityLevel, value)

    @field_validator("infrastructure_level", mode="before")
    @classmethod
    def keep_known_infrastructure_level(cls, value):
        return coerce_category(InfrastructureLevel, value)

class PopulationZone(PopulationZoneBase):
    id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)
