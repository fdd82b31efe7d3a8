from sqlmodel import SQLModel
from typing import Optional
from enum import Enum

from riskmap.models.geo import GeoPoint

class LocationAccuracy(str, Enum):
    HIGH = "high"      # < 10 meters
    MEDIUM = "medium"  # 10-50 meters
    LOW = "low"        # > 50 meters
    UNKNOWN = "unknown"

class UserLocation(SQLModel):
    """Position reported by the user-location provider"""
    latitude: float
    longitude: float
    accuracy: Optional[float] = None  # meters

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @property
    def accuracy_level(self) -> LocationAccuracy:
        """Determine accuracy level based on accuracy value"""
        if self.accuracy is None:
            return LocationAccuracy.UNKNOWN
        elif self.accuracy < 10:
            return LocationAccuracy.HIGH
        elif self.accuracy < 50:
            return LocationAccuracy.MEDIUM
        else:
            return LocationAccuracy.LOW
