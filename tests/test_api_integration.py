"""
Integration tests for API endpoints.

Tests the full HTTP request/response cycle with injected dependencies.
"""
import json

import pytest

from farmopt.config import settings
from farmopt.main import app
from farmopt.api.dependencies import get_yield_predictor
from farmopt.domain.models import CropProfile
from farmopt.infrastructure.crop_catalog import CropCatalog, get_crop_catalog
from farmopt.services.domain.yield_predictor import YieldPredictor


LAND = {"total_area": 2.5, "length": 158, "width": 158, "soil_type": "loam"}
PADI_WEATHER = {"temperature": 26, "rainfall": 220, "humidity": 72}
REFERENCE_PARAMS = {
    "land_area": 10,
    "soil_quality": 70,
    "water_availability": 60,
    "fertilizer_amount": 50,
    "seed_quality": 80,
    "crop_type": "Wheat",
}


# ============================================================
# Health Check Tests
# ============================================================

class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, test_client):
        """Root endpoint should return healthy status."""
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "service" in data
        assert "version" in data

    def test_health_endpoint(self, test_client):
        """Health endpoint should return healthy status."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_health_endpoint_async(self, async_test_client):
        response = await async_test_client.get("/health")

        assert response.status_code == 200

    def test_rate_limit_enforced(self, test_client):
        """Requests beyond the per-minute limit are refused with 429."""
        for _ in range(settings.rate_limit_requests):
            assert test_client.get("/health").status_code == 200

        response = test_client.get("/health")

        assert response.status_code == 429


# ============================================================
# Crop Endpoint Tests
# ============================================================

class TestCropEndpoints:
    """Tests for crop catalog and suitability endpoints."""

    def test_list_crops(self, test_client):
        response = test_client.get("/api/v1/crops")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 5
        assert data["crops"][0]["name"] == "Padi"
        assert data["crops"][0]["ideal_temperature"] == [24, 30]

    def test_get_crop(self, test_client):
        response = test_client.get("/api/v1/crops/4")

        assert response.status_code == 200
        assert response.json()["name"] == "Singkong"

    def test_get_unknown_crop(self, test_client):
        response = test_client.get("/api/v1/crops/99")

        assert response.status_code == 404
        assert "99" in response.json()["detail"]

    def test_rank_crops(self, test_client):
        response = test_client.post(
            "/api/v1/crops/suitability",
            json={"land": LAND, "weather": PADI_WEATHER},
        )

        assert response.status_code == 200
        rankings = response.json()["rankings"]
        assert rankings[0]["name"] == "Padi"
        assert rankings[0]["score"] == 1.0
        scores = [r["score"] for r in rankings]
        assert scores == sorted(scores, reverse=True)

    def test_inconsistent_land_dimensions_rejected(self, test_client):
        land = {**LAND, "length": 100, "width": 100}

        response = test_client.post(
            "/api/v1/crops/suitability",
            json={"land": land, "weather": PADI_WEATHER},
        )

        assert response.status_code == 422

    def test_length_without_width_rejected(self, test_client):
        response = test_client.post(
            "/api/v1/crops/suitability",
            json={"land": {"total_area": 1, "length": 100}, "weather": PADI_WEATHER},
        )

        assert response.status_code == 422

    def test_humidity_above_100_rejected(self, test_client):
        response = test_client.post(
            "/api/v1/crops/suitability",
            json={"land": LAND, "weather": {**PADI_WEATHER, "humidity": 120}},
        )

        assert response.status_code == 422

    def test_degenerate_catalog_range(self, test_client):
        """A crop with an empty ideal range is reported as a domain error."""
        broken = CropProfile(
            id="x",
            name="Broken",
            ideal_temperature=(25, 25),
            ideal_rainfall=(100, 200),
            ideal_humidity=(60, 80),
            growth_days=100,
            average_yield=1.0,
        )
        app.dependency_overrides[get_crop_catalog] = lambda: CropCatalog([broken])

        response = test_client.post(
            "/api/v1/crops/suitability",
            json={"land": LAND, "weather": PADI_WEATHER},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "Domain error"


# ============================================================
# Harvest History Endpoint Tests
# ============================================================

class TestHistoryEndpoints:
    """Tests for generated harvest history endpoints."""

    def test_history_with_seed_is_reproducible(self, test_client):
        first = test_client.get("/api/v1/crops/1/history", params={"months": 6, "seed": 11})
        second = test_client.get("/api/v1/crops/1/history", params={"months": 6, "seed": 11})

        assert first.status_code == 200
        assert len(first.json()["records"]) == 6
        assert first.json() == second.json()

    def test_history_default_months(self, test_client):
        response = test_client.get("/api/v1/crops/2/history")

        assert response.status_code == 200
        assert response.json()["months"] == 12

    def test_history_months_validated(self, test_client):
        response = test_client.get("/api/v1/crops/1/history", params={"months": 0})

        assert response.status_code == 422

    def test_history_unknown_crop(self, test_client):
        response = test_client.get("/api/v1/crops/99/history")

        assert response.status_code == 404

    def test_history_recommendations(self, test_client):
        response = test_client.get(
            "/api/v1/crops/1/history/recommendations", params={"seed": 5}
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["rankings"]) == 5
        assert 24 <= data["average_weather"]["temperature"] <= 30

    def test_crop_comparison(self, test_client):
        first = test_client.get("/api/v1/crops/comparison", params={"seed": 3})
        second = test_client.get("/api/v1/crops/comparison", params={"seed": 3})

        assert first.status_code == 200
        data = first.json()
        assert data["months"] == 4
        assert [c["name"] for c in data["crops"]] == ["Padi", "Jagung", "Kedelai", "Singkong", "Cabai"]
        assert data == second.json()

    def test_crop_comparison_yield_per_hectare(self, test_client):
        crops = test_client.get("/api/v1/crops/comparison", params={"months": 6}).json()["crops"]

        for crop in crops:
            # land area per month is between 1 and 1.5 ha
            assert crop["average_yield"] / 1.5 <= crop["average_yield_per_hectare"] * (1 + 1e-9)
            assert crop["average_yield_per_hectare"] <= crop["average_yield"] * (1 + 1e-9)

    def test_crop_comparison_months_validated(self, test_client):
        response = test_client.get("/api/v1/crops/comparison", params={"months": 0})

        assert response.status_code == 422


# ============================================================
# Prediction Endpoint Tests
# ============================================================

class TestPredictionEndpoint:
    """Tests for the yield prediction endpoint."""

    @pytest.fixture(autouse=True)
    def fixed_predictor(self, make_random):
        app.dependency_overrides[get_yield_predictor] = lambda: YieldPredictor(
            CropCatalog.default(), rng=make_random(0.5)
        )

    def test_predict_yield(self, test_client):
        response = test_client.post(
            "/api/v1/predictions/yield",
            json={"crop_id": "1", "land": LAND, "weather": PADI_WEATHER},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["recommended_crop_id"] == "1"
        assert data["predicted_yield"] == pytest.approx(13.75)
        assert data["optimized_area"] == pytest.approx(2.5)
        assert data["confidence_score"] == pytest.approx(95.0)
        assert data["optimized_dimensions"]["length"] == pytest.approx(189.7367, abs=1e-3)

    def test_unknown_crop_returns_zeroed_prediction(self, test_client):
        response = test_client.post(
            "/api/v1/predictions/yield",
            json={"crop_id": "missing", "land": LAND, "weather": PADI_WEATHER},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["predicted_yield"] == 0.0
        assert data["optimized_area"] == 2.5
        assert data["confidence_score"] == 0.0

    def test_non_positive_area_rejected(self, test_client):
        response = test_client.post(
            "/api/v1/predictions/yield",
            json={"crop_id": "1", "land": {"total_area": 0}, "weather": PADI_WEATHER},
        )

        assert response.status_code == 422


# ============================================================
# Optimization Endpoint Tests
# ============================================================

class TestOptimizationEndpoints:
    """Tests for land optimization endpoints."""

    def test_optimize(self, test_client):
        response = test_client.post("/api/v1/optimization", json=REFERENCE_PARAMS)

        assert response.status_code == 200
        data = response.json()
        assert data["optimal_land_area"] == pytest.approx(4.689502, abs=1e-6)
        assert data["expected_yield"] == pytest.approx(2.3710562449543975, rel=1e-9)
        assert data["sustainability_score"] == pytest.approx(20.505609400568407, rel=1e-9)
        assert data["marginal_product_of_land"] > 0
        assert sum(data["recommended_crop_allocation"].values()) == pytest.approx(1.0)

    def test_optimize_zero_fertilizer(self, test_client):
        response = test_client.post(
            "/api/v1/optimization", json={**REFERENCE_PARAMS, "fertilizer_amount": 0}
        )

        assert response.status_code == 200
        assert response.json()["resource_efficiency"] == 0.0

    def test_optimize_invalid_params(self, test_client):
        response = test_client.post(
            "/api/v1/optimization", json={**REFERENCE_PARAMS, "soil_quality": 150}
        )

        assert response.status_code == 422

    def test_optimize_infinite_input_rejected(self, test_client):
        """An overflowing JSON number is refused instead of producing null metrics."""
        body = json.dumps({**REFERENCE_PARAMS, "fertilizer_amount": 0}).replace(
            '"fertilizer_amount": 0', '"fertilizer_amount": 1e400'
        )

        response = test_client.post(
            "/api/v1/optimization",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_suitability_infinite_weather_rejected(self, test_client):
        body = json.dumps({"land": LAND, "weather": PADI_WEATHER}).replace(
            '"temperature": 26', '"temperature": -1e400'
        )

        response = test_client.post(
            "/api/v1/crops/suitability",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_compare_scenarios(self, test_client):
        response = test_client.post(
            "/api/v1/optimization/scenarios",
            json={
                "base": REFERENCE_PARAMS,
                "variations": [{"fertilizer_amount": 100}, {"land_area": 20}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["scenario_count"] == 3
        base = test_client.post("/api/v1/optimization", json=REFERENCE_PARAMS).json()
        assert data["results"][0]["optimal_land_area"] == base["optimal_land_area"]
        assert data["results"][2]["optimal_land_area"] == pytest.approx(2 * base["optimal_land_area"])

    def test_compare_scenarios_invalid_variation(self, test_client):
        response = test_client.post(
            "/api/v1/optimization/scenarios",
            json={"base": REFERENCE_PARAMS, "variations": [{"seed_quality": -10}]},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_land_dimensions(self, test_client):
        response = test_client.get("/api/v1/land/dimensions", params={"area": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["golden_ratio"] == {"length": 127, "width": 79}
        assert data["square"] == {"length": 100, "width": 100}

    def test_land_dimensions_requires_positive_area(self, test_client):
        response = test_client.get("/api/v1/land/dimensions", params={"area": 0})

        assert response.status_code == 422


# ============================================================
# Response Format Tests
# ============================================================

class TestResponseFormats:
    """Tests for API documentation."""

    def test_openapi_schema_available(self, test_client):
        response = test_client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/v1/optimization" in paths
        assert "/api/v1/optimization/scenarios" in paths
        assert "/api/v1/predictions/yield" in paths
        assert "/api/v1/crops/suitability" in paths

    def test_rate_limit_documented_in_openapi(self, test_client):
        paths = test_client.get("/openapi.json").json()["paths"]

        assert "429" in paths["/api/v1/optimization"]["post"]["responses"]

    def test_docs_endpoint_available(self, test_client):
        response = test_client.get("/docs")

        assert response.status_code == 200
