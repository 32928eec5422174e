"""
API tests for the intake, clarification, load-calc and job summary endpoints
"""

import logging

import pytest

from app.routes.intake import MISSING_INPUT_MESSAGE, NEEDS_CLARIFICATION_MESSAGE, COMPLETE_MESSAGE
from domain.validation.exterior_validator import STORIES_ISSUE


WORKED_EXAMPLE = {
    "sqft": 2200,
    "stories": 2,
    "windows": "many",
    "orientation": "south",
    "insulation": "average",
    "siding": "vinyl",
    "designDeltaT": 40,
    "indoorRH": 45,
    "ductsInAtticOrCrawl": True,
}


class TestHealth:

    def test_root(self, client):
        assert client.get("/").status_code == 200

    def test_healthz(self, client):
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestIntakeEndpoint:

    def test_missing_address(self, client, mock_vision):
        response = client.post("/api/v1/intake", json={
            "address": "  ",
            "exteriorImageUrls": ["https://img/front.jpg"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["message"] == MISSING_INPUT_MESSAGE
        assert body["data"]["photoCountExterior"] == 1
        mock_vision.analyze_exterior.assert_not_called()

    def test_missing_exterior_photo(self, client):
        response = client.post("/api/v1/intake", json={
            "address": "12 Oak St",
            "equipmentImageUrls": ["https://img/label.jpg"],
        })

        body = response.json()
        assert body["message"] == MISSING_INPUT_MESSAGE
        assert body["data"]["photoCountExterior"] == 0
        assert body["data"]["photoCountEquipment"] == 1

    def test_complete_intake(self, client):
        response = client.post("/api/v1/intake", json={
            "address": "12 Oak St",
            "exteriorImageUrls": ["https://img/front.jpg"],
            "equipmentImageUrls": ["https://img/label.jpg", "https://img/unit.jpg"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == COMPLETE_MESSAGE
        data = body["data"]
        assert data["exteriorAnalysis"]["stories"] == 2
        assert data["equipmentAnalysis"]["afue"] == 95.0
        assert data["equipmentAnalysis"]["afueSource"] == "model_lookup"
        assert data["warranty"]["likelyWarrantyStatus"] == "likely_in_parts_warranty"
        assert data["photoCountEquipment"] == 2

    def test_needs_clarification(self, client, mock_vision):
        mock_vision.analyze_exterior.return_value = '{"stories": "unknown", "siding": "vinyl", "windows": "few", "confidence": 0.9}'

        response = client.post("/api/v1/intake", json={
            "address": "12 Oak St",
            "exteriorImageUrls": ["https://img/front.jpg"],
        })

        body = response.json()
        assert body["message"] == NEEDS_CLARIFICATION_MESSAGE
        assert body["data"]["exteriorValidation"]["issues"] == [STORIES_ISSUE]
        assert body["data"]["equipmentAnalysis"] is None

    def test_parsed_intake(self, client):
        response = client.post("/api/v1/intake/parsed", json={
            "address": "12 Oak St",
            "exteriorOutput": {"stories": 1, "siding": "brick", "windows": "average", "confidence": 0.8},
            "equipmentOutput": '```json\n{"afue": 96, "ventType": "metal_flue", "afueSource": "label"}\n```',
        })

        data = response.json()["data"]
        assert data["exteriorValidation"]["needsClarification"] is False
        assert data["equipmentFlags"]["afueVentMismatch"] is True


class TestClarifyEndpoint:

    def test_clarify(self, client):
        response = client.post("/api/v1/intake/clarify", json={
            "exterior": {"stories": "unknown", "siding": "vinyl", "windows": "many", "gutters": "yes", "confidence": 0.9},
            "stories": 1.5,
            "windows": "many",
            "siding": "fiber cement",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["exterior"]["stories"] == 1.5
        assert body["exterior"]["siding"] == "fiber cement"
        assert body["exterior"]["gutters"] == "yes"
        assert body["exteriorValidation"]["needsClarification"] is False

    def test_clarify_without_photo_read(self, client):
        response = client.post("/api/v1/intake/clarify", json={"stories": "2", "windows": "few", "siding": "brick"})

        body = response.json()
        assert body["exterior"]["confidence"] == 0.8
        assert body["exteriorValidation"]["issues"] == []


class TestLoadCalcEndpoint:

    def test_worked_example(self, client):
        response = client.post("/api/v1/load-calc", json=WORKED_EXAMPLE)

        assert response.status_code == 200
        assert response.json() == {
            "sensibleBTUH": 44083,
            "latentBTUH": 8817,
            "totalBTUH": 52900,
            "recommendedTonnage": 4.5,
            "notes": [
                "Many windows: increased gain/loss.",
                "South/West orientation: higher solar gain.",
                "Multi-story: extra load for stack effect and envelope area.",
                "Ducts in unconditioned space: 10% penalty added.",
                "Based on the inputs, total design load is ~52900 BTU/h, which is roughly 4.50 tons.",
            ],
        }

    def test_defaults_applied(self, client):
        response = client.post("/api/v1/load-calc", json={"sqft": 1500})

        assert response.json()["totalBTUH"] == 24000

    def test_spelling_variants_accepted(self, client):
        response = client.post("/api/v1/load-calc", json={**WORKED_EXAMPLE, "windows": "Many", "orientation": "SOUTH"})

        assert response.json()["totalBTUH"] == 52900

    def test_zero_area_rejected(self, client):
        response = client.post("/api/v1/load-calc", json={"sqft": 0})

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "type": "InvalidLoadInputError",
                "message": "Conditioned area must be greater than 0 sq ft",
            }
        }

    def test_missing_area_is_schema_error(self, client):
        assert client.post("/api/v1/load-calc", json={"stories": 2}).status_code == 422

    def test_unknown_orientation_value_rejected(self, client):
        response = client.post("/api/v1/load-calc", json={"sqft": 1500, "orientation": "up"})
        assert response.status_code == 422

    @pytest.mark.parametrize("body", [
        '{"sqft": NaN}',
        '{"sqft": Infinity}',
        '{"sqft": 1500, "designDeltaT": -Infinity}',
        '{"sqft": 1500, "indoorRH": NaN}',
    ])
    def test_non_finite_numbers_rejected(self, client, body):
        response = client.post("/api/v1/load-calc", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 422

    def test_overflowing_load_rejected(self, client):
        response = client.post("/api/v1/load-calc", json={"sqft": 1e300, "designDeltaT": 1e300})

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "InvalidLoadInputError"


class TestJobSummaryEndpoint:

    def test_full_summary(self, client):
        response = client.post("/api/v1/job/summary", json={
            "address": "12 Oak St",
            "exterior": {"stories": 2, "siding": "vinyl", "windows": "many", "confidence": 0.9},
            "equipmentAnalysis": {"modelNumber": "AUD2B080A9V3VBA", "manufactureYear": 2012, "ventType": "metal_flue"},
            "loadCalcInput": WORKED_EXAMPLE,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["address"] == "12 Oak St"
        assert data["exterior"]["siding"] == "vinyl"
        assert data["equipment"]["afue"] == 80.0
        assert data["warranty"]["likelyWarrantyStatus"] == "likely_out_of_warranty"
        assert data["equipmentFlags"] == {"afueVentMismatch": False, "notes": []}
        assert data["loadCalc"]["recommendedTonnage"] == 4.5

    def test_address_only(self, client):
        data = client.post("/api/v1/job/summary", json={"address": "12 Oak St"}).json()

        assert data["exterior"] is None
        assert data["equipment"] is None
        assert data["equipmentFlags"] is None
        assert data["loadCalc"] is None
        assert data["warranty"]["likelyWarrantyStatus"] == "unknown"

    def test_bad_load_input_rejected(self, client):
        response = client.post("/api/v1/job/summary", json={
            "address": "12 Oak St",
            "loadCalcInput": {"sqft": -10},
        })

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "InvalidLoadInputError"

    def test_logged_under_route_logger(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="app.routes.job"):
            client.post("/api/v1/job/summary", json={"address": "12 Oak St"})

        assert any(
            record.name == "app.routes.job" and "12 Oak St" in record.getMessage()
            for record in caplog.records
        )
