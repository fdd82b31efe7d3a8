"""
Core modules for the medical facility and emergency risk map

This package contains the geospatial analysis logic:
- geodesy: Haversine distance, point-in-polygon and polygon area
- locator: Nearest facility / zone search and coverage lookups
- classifier: Risk, severity and density categories, colors and labels
- polygons: Known and generated zone boundaries
- metrics: Per-zone and dashboard-wide incident aggregation
- routing: Straight-line route distance and duration estimates
- overlays: Display-ready payloads for a render pass
"""

from .geodesy import (
    calculate_distance,
    distance_km,
    is_within_radius,
    validate_coordinates,
    point_in_polygon,
    calculate_polygon_area
)

from .locator import (
    nearest,
    nearest_center,
    nearest_emergency_zone,
    nearest_hospitals_to_zone,
    centers_covering
)

from .classifier import (
    risk_level_from_rate,
    risk_color,
    severity_color,
    density_color,
    facility_color,
    color_for,
    risk_label,
    density_label
)

from .polygons import (
    KNOWN_ZONE_POLYGONS,
    ShapeKind,
    ZoneShape,
    generate_irregular_polygon,
    resolve_zone_shape,
    zone_polygon
)

from .metrics import (
    calculate_zone_metrics,
    calculate_emergency_stats
)

from .routing import (
    RouteEstimate,
    estimate_route
)

__all__ = [
    # Geodesy
    "calculate_distance",
    "distance_km",
    "is_within_radius",
    "validate_coordinates",
    "point_in_polygon",
    "calculate_polygon_area",

    # Locator
    "nearest",
    "nearest_center",
    "nearest_emergency_zone",
    "nearest_hospitals_to_zone",
    "centers_covering",

    # Classifier
    "risk_level_from_rate",
    "risk_color",
    "severity_color",
    "density_color",
    "facility_color",
    "color_for",
    "risk_label",
    "density_label",

    # Polygons
    "KNOWN_ZONE_POLYGONS",
    "ShapeKind",
    "ZoneShape",
    "generate_irregular_polygon",
    "resolve_zone_shape",
    "zone_polygon",

    # Metrics
    "calculate_zone_metrics",
    "calculate_emergency_stats",

    # Routing
    "RouteEstimate",
    "estimate_route"
]
