"""
Pytest configuration and fixtures
"""
import pytest
from types import MappingProxyType
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from app.main import app
from app.routes.intake import get_intake_pipeline
from domain.core.models import HouseExteriorAttributes, EquipmentAttributes
from domain.mechanical.equipment_enricher import EquipmentEnricher
from models.enums import (
    StoryCount, SidingMaterial, WindowDensity, GutterPresence, ExteriorCondition,
    EquipmentType, VentMaterial, AfueProvenance, Stages,
)
from services.intake_pipeline import IntakePipeline

# Warranty ages in tests are computed against this year
TEST_YEAR = 2025


@pytest.fixture
def clear_exterior():
    """Confident, complete exterior read"""
    return HouseExteriorAttributes(
        story_count=StoryCount.two,
        siding_material=SidingMaterial.vinyl,
        window_density=WindowDensity.average,
        gutter_presence=GutterPresence.yes,
        exterior_condition=ExteriorCondition.good,
        confidence=0.9,
    )


@pytest.fixture
def trane_furnace():
    """Trane 80% furnace with an unreadable AFUE"""
    return EquipmentAttributes(
        equipment_type=EquipmentType.furnace,
        manufacturer="Trane",
        model_number=" aud2b080a9v3vba ",
        serial_number="123745N3G1G",
        input_btuh=80000,
        manufacture_year=2012,
        stages=Stages.two_stage,
        vent_material=VentMaterial.metal_flue,
        afue_provenance=AfueProvenance.unknown,
    )


@pytest.fixture
def afue_table():
    return MappingProxyType({"AUD2B080A9V3VBA": 80.0, "GMH950703BX": 95.0, "TEST96": 96.0})


@pytest.fixture
def current_year():
    return TEST_YEAR


@pytest.fixture
def enricher(afue_table, current_year):
    return EquipmentEnricher(afue_table=afue_table, current_year=current_year)


@pytest.fixture
def mock_vision():
    """VisionParser stand-in returning canned model output"""
    vision = MagicMock()
    vision.analyze_exterior.return_value = (
        '{"stories": 2, "siding": "vinyl", "windows": "many", '
        '"gutters": "yes", "condition": "good", "confidence": 0.9}'
    )
    vision.analyze_equipment.return_value = (
        '```json\n{"equipmentType": "furnace", "manufacturer": "Goodman", '
        '"modelNumber": "GMH950703BX", "afue": null, "manufactureYear": 2019, '
        '"ventType": "pvc", "afueSource": "unknown"}\n```'
    )
    return vision


@pytest.fixture
def pipeline(enricher, mock_vision):
    return IntakePipeline(enricher=enricher, vision=mock_vision)


@pytest.fixture
def client(pipeline):
    """Test client with the intake pipeline replaced by the fixture pipeline"""
    app.dependency_overrides[get_intake_pipeline] = lambda: pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
