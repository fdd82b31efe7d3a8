"""
Human readable strings for popups and route panels.
Unit suffixes follow the dashboard's Spanish interface.
"""

from decimal import Decimal, ROUND_HALF_UP

def _round_half_up(value: float, places: int = 0) -> Decimal:
    # Rounds the shortest repr of the float, so 2.345 -> 2.35 and 2.5 -> 3
    exponent = Decimal(1).scaleb(-places)
    return Decimal(repr(float(value))).quantize(exponent, rounding=ROUND_HALF_UP)

def format_distance(distance_km: float) -> str:
    """Meters below 1 km, kilometers with two decimals otherwise"""
    meters = _round_half_up(distance_km * 1000)
    if meters < 1000:
        return f"{meters} metros"
    return f"{_round_half_up(distance_km, 2)} km"

def format_duration(minutes: float) -> str:
    # Split after rounding so 119.6 reads "2h 0min", never "1h 60min"
    total = int(_round_half_up(minutes))
    if total < 60:
        return f"{total} min"
    hours, mins = divmod(total, 60)
    return f"{hours}h {mins}min"

def format_response_time(minutes: float) -> str:
    return format_duration(minutes)

def format_emergency_rate(rate: float) -> str:
    return f"{_round_half_up(rate, 1)} por 1000 hab."

def format_density(density: float) -> str:
    return f"{_round_half_up(density, 1)} hab/km²"

def format_population(population: int) -> str:
    return f"{population:,} habitantes"
