import pytest
from datetime import datetime, timezone, timedelta

from riskmap.models import (
    MedicalCenter,
    EmergencyZone,
    EmergencyIncident,
    PopulationZone,
    AgeGroups
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

@pytest.fixture
def medical_centers():
    return [
        MedicalCenter(
            id="1",
            name="Hospital Nacional Rosales",
            type="hospital",
            latitude=13.7035,
            longitude=-89.2040,
            address="Final Calle Arce, San Salvador",
            phone="2231-9200",
            schedule="24 horas",
            services=["Emergencias", "Cirugía"],
            emergency=True
        ),
        MedicalCenter(
            id="2",
            name="Clínica Comunal Centro",
            type="clinic",
            latitude=13.6960,
            longitude=-89.2150,
            services=["Consulta general"],
            emergency=False
        ),
        MedicalCenter(
            id="4",
            name="Hospital Zacamil",
            type="hospital",
            latitude=13.7340,
            longitude=-89.2100,
            emergency=True
        ),
        MedicalCenter(
            id="6",
            name="Hospital San Juan de Dios Santa Ana",
            type="hospital",
            latitude=13.9940,
            longitude=-89.5580,
            emergency=True
        ),
        MedicalCenter(
            id="9",
            name="Unidad de Salud Soyapango",
            type="health_center",
            latitude=13.7400,
            longitude=-89.1420,
            emergency=False
        ),
    ]

@pytest.fixture
def emergency_zones():
    return [
        EmergencyZone(
            id="zone-ss-centro",
            name="Centro Histórico San Salvador",
            municipality="San Salvador",
            department="San Salvador",
            latitude=13.6929,
            longitude=-89.2182,
            radius=2000,
            population=85000,
            emergency_rate=45.2,
            risk_level="critical",
            nearest_hospitals=["1", "2"],
            average_response_time=8.5
        ),
        EmergencyZone(
            id="zone-ss-soyapango",
            name="Soyapango",
            municipality="Soyapango",
            department="San Salvador",
            latitude=13.7420,
            longitude=-89.1401,
            radius=3000,
            population=120000,
            emergency_rate=38.7,
            risk_level="high",
            nearest_hospitals=["1"],
            average_response_time=12.3
        ),
        EmergencyZone(
            id="zone-sa-centro",
            name="Centro Santa Ana",
            municipality="Santa Ana",
            department="Santa Ana",
            latitude=13.9944,
            longitude=-89.5594,
            radius=2200,
            population=65000,
            emergency_rate=28.4,
            risk_level="medium",
            nearest_hospitals=["6"],
            average_response_time=9.2
        ),
    ]

@pytest.fixture
def emergency_incidents():
    return [
        EmergencyIncident(
            id="inc-001",
            incident_type="cardiac",
            severity="critical",
            latitude=13.6929,
            longitude=-89.2182,
            zone_id="zone-ss-centro",
            hospital_id="1",
            response_time=5,
            resolved=True,
            reported_at=NOW - timedelta(hours=2),
            resolved_at=NOW - timedelta(hours=1)
        ),
        EmergencyIncident(
            id="inc-002",
            incident_type="accident",
            severity="high",
            latitude=13.6935,
            longitude=-89.2170,
            zone_id="zone-ss-centro",
            hospital_id="1",
            response_time=15,
            resolved=True,
            reported_at=NOW - timedelta(hours=4),
            resolved_at=NOW - timedelta(hours=3)
        ),
        EmergencyIncident(
            id="inc-003",
            incident_type="trauma",
            severity="critical",
            latitude=13.6920,
            longitude=-89.2190,
            zone_id="zone-ss-centro",
            resolved=False,
            reported_at=NOW - timedelta(minutes=30)
        ),
        EmergencyIncident(
            id="inc-004",
            incident_type="medical",
            severity="medium",
            latitude=13.9944,
            longitude=-89.5594,
            zone_id="zone-sa-centro",
            hospital_id="6",
            response_time=8,
            resolved=True,
            reported_at=NOW - timedelta(hours=1)
        ),
    ]

@pytest.fixture
def population_zone():
    return PopulationZone(
        id="pop-ss-metro",
        name="Área Metropolitana San Salvador",
        municipality="San Salvador",
        department="San Salvador",
        latitude=13.7042,
        longitude=-89.2042,
        radius=5000,
        population=316090,
        population_density=11175.4,
        density_level="very_high",
        area_km2=28.3,
        urban_percentage=95.2,
        rural_percentage=4.8,
        growth_rate=0.8,
        age_groups=AgeGroups(children=85000, adults=205000, elderly=26090),
        economic_activity=["Comercio", "Servicios", "Industria", "Gobierno"],
        infrastructure_level="advanced"
    )
