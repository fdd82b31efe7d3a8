"""
Utility modules for the medical facility and emergency risk map

- formatting: Distance, duration, rate, density and population strings
"""

from .formatting import (
    format_distance,
    format_duration,
    format_response_time,
    format_emergency_rate,
    format_density,
    format_population
)

__all__ = [
    "format_distance",
    "format_duration",
    "format_response_time",
    "format_emergency_rate",
    "format_density",
    "format_population"
]
