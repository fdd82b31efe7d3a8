"""
Geospatial analysis core for the medical facility and emergency risk map

Pure, synchronous helpers: distances and routes between users and
facilities, risk/density classification, zone polygon synthesis and
per-zone incident metrics.
"""

__version__ = "1.0.0"
