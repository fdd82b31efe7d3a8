import math
import pytest

from riskmap.core.polygons import (
    KNOWN_ZONE_POLYGONS,
    METERS_PER_DEGREE,
    ShapeKind,
    name_seed,
    seeded_unit,
    polygon_point_count,
    generate_irregular_polygon,
    resolve_zone_shape,
    zone_polygon,
    coverage_ring
)
from riskmap.core.geodesy import distance_km
from riskmap.models import EmergencyZone, GeoPoint

def make_zone(name, lat=13.70, lng=-89.20, radius=2000):
    return EmergencyZone(
        id=f"zone-{name}",
        name=name,
        latitude=lat,
        longitude=lng,
        radius=radius,
        risk_level="medium"
    )

def test_name_seed_is_code_point_sum():
    """The seed is the plain sum of character codes."""
    assert name_seed("") == 0
    assert name_seed("AB") == 65 + 66
    assert name_seed("á") == 225

def test_seeded_unit_range():
    """Draws stay in [0, 1) and repeat for the same arguments."""
    seed = name_seed("Test Zone Alpha")
    for index in range(30):
        value = seeded_unit(seed, index)
        assert 0 <= value < 1
        assert value == seeded_unit(seed, index)

def test_point_count_range():
    """Every name yields between 8 and 12 vertices."""
    for name in ["", "a", "Soyapango", "Test Zone Alpha", "Usulután Rural", "x" * 200]:
        assert 8 <= polygon_point_count(name_seed(name)) <= 12

def test_generated_polygon_is_reproducible():
    """Same center, radius and name give bit-identical rings."""
    first = generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Alpha")
    second = generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Alpha")
    assert first == second

def test_generated_polygon_closed_and_sized():
    """The ring is closed and has N + 1 points for N in [8, 12]."""
    ring = generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Alpha")
    assert ring[0] == ring[-1]
    assert 9 <= len(ring) <= 13
    assert len(ring) - 1 == polygon_point_count(name_seed("Test Zone Alpha"))

def test_generated_polygon_radius_variation():
    """Vertex offsets stay within 70% - 130% of the base radius."""
    radius = 2000
    ring = generate_irregular_polygon(13.70, -89.20, radius, "Test Zone Alpha")
    for lat, lng in ring:
        offset_m = math.hypot(lat - 13.70, lng + 89.20) * METERS_PER_DEGREE
        assert 0.7 * radius - 1e-6 <= offset_m <= 1.3 * radius + 1e-6

def test_generated_polygon_different_names_differ():
    """Different names give different shapes."""
    alpha = generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Alpha")
    beta = generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Beta")
    assert alpha != beta

def test_zero_radius_collapses_to_center():
    """A non-positive radius puts every vertex on the center."""
    for radius in (0, -500):
        ring = generate_irregular_polygon(13.70, -89.20, radius, "Test Zone Alpha")
        assert set(ring) == {(13.70, -89.20)}

def test_known_zone_uses_table():
    """Known names return the hand-authored 9-point boundary."""
    zone = make_zone("Centro Histórico San Salvador", lat=13.6929, lng=-89.2182)
    shape = resolve_zone_shape(zone)

    assert shape.kind == ShapeKind.KNOWN
    assert shape.ring == KNOWN_ZONE_POLYGONS["Centro Histórico San Salvador"]
    assert len(shape.ring) == 9
    assert shape.ring[0] == shape.ring[-1]

def test_known_zone_ring_is_a_copy():
    """Callers cannot mutate the lookup table through the result."""
    zone = make_zone("Santa Ana Centro")
    zone_polygon(zone).append((0.0, 0.0))
    assert len(KNOWN_ZONE_POLYGONS["Santa Ana Centro"]) == 10

def test_all_known_polygons_closed():
    """Every table entry is a closed ring of 8-10 distinct vertices."""
    for name, ring in KNOWN_ZONE_POLYGONS.items():
        assert ring[0] == ring[-1], name
        assert 8 <= len(ring) - 1 <= 10, name

def test_unknown_zone_is_generated():
    """Other names fall through to the generator, deterministically."""
    zone = make_zone("Test Zone Alpha")
    shape = resolve_zone_shape(zone)

    assert shape.kind == ShapeKind.GENERATED
    assert shape.ring == generate_irregular_polygon(13.70, -89.20, 2000, "Test Zone Alpha")
    assert zone_polygon(zone) == zone_polygon(zone)

def test_name_collision_shares_shape():
    """Two zones with the same name and geometry render the same ring."""
    first = make_zone("Duplicada")
    second = first.model_copy(update={"id": "zone-other"})
    assert zone_polygon(first) == zone_polygon(second)

def test_coverage_ring():
    """Coverage rings are closed and sit on the circle."""
    center = GeoPoint(13.7035, -89.2040)
    ring = coverage_ring(center, 1000)

    assert ring[0] == ring[-1]
    assert len(ring) == 33
    for lat, lng in ring:
        assert distance_km(center, GeoPoint(lat, lng)) == pytest.approx(1.0, rel=0.02)

@pytest.mark.parametrize("latitude", [90.0, -90.0, 89.9999999])
def test_coverage_ring_at_the_poles(latitude):
    """Rings centered on a pole stay finite and closed."""
    ring = coverage_ring(GeoPoint(latitude, 10.0), 1000)
    assert ring[0] == ring[-1]
    assert all(math.isfinite(lat) and math.isfinite(lng) for lat, lng in ring)
