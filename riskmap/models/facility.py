from sqlmodel import SQLModel, Field
from typing import List, Union
from enum import Enum
from pydantic import field_validator

from riskmap.models.geo import GeoPoint
from riskmap.models.categories import coerce_category

class FacilityType(str, Enum):
    HOSPITAL = "hospital"
    CLINIC = "clinic"
    HEALTH_CENTER = "health_center"

class MedicalCenterBase(SQLModel):
    name: str
    type: Union[FacilityType, str]
    latitude: float
    longitude: float
    address: str = ""
    phone: str = ""
    schedule: str = ""
    services: List[str] = Field(default_factory=list)
    emergency: bool = False  # 24h emergency capability

    @field_validator("type", mode="before")
    @classmethod
    def keep_known_type(cls, value):
        return coerce_category(FacilityType, value)

class MedicalCenter(MedicalCenterBase):
    id: str

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)
