from dataclasses import dataclass
from typing import List, Tuple

# Closed ring of (latitude, longitude) pairs, first pair repeated as last
Ring = List[Tuple[float, float]]

@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees (WGS84)"""
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)
