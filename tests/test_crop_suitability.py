"""
Unit tests for crop suitability ranking.
"""
import pytest

from farmopt.domain.exceptions import DegenerateRangeError
from farmopt.domain.models import CropProfile, EnvironmentSnapshot, LandParcel
from farmopt.infrastructure.crop_catalog import CropCatalog
from farmopt.services.domain.crop_suitability import rank_crops
from farmopt.utils.range_scoring import AbsoluteRangeScorer


class TestRankCrops:
    """Tests for rank_crops."""

    def test_reference_catalog_ranking(self, catalog, parcel, padi_weather):
        """Padi leads; ties at 1.0 keep catalog order."""
        rankings = rank_crops(parcel, padi_weather, catalog)

        assert [r.name for r in rankings] == ["Padi", "Jagung", "Kedelai", "Singkong", "Cabai"]
        assert [r.score for r in rankings[:3]] == [1.0, 1.0, 1.0]
        assert rankings[3].score == pytest.approx((1 + 0.8 + 1) / 3)
        assert rankings[4].score == pytest.approx((1 + 0 + (1 - 2 * 2 / 70)) / 3)

    def test_one_score_per_crop(self, catalog, parcel, padi_weather):
        rankings = rank_crops(parcel, padi_weather, catalog)

        assert len(rankings) == len(catalog)
        assert {r.crop_id for r in rankings} == {c.id for c in catalog}

    @pytest.mark.parametrize("snapshot", [
        EnvironmentSnapshot(temperature=15, rainfall=50, humidity=40),
        EnvironmentSnapshot(temperature=35, rainfall=400, humidity=95),
        EnvironmentSnapshot(temperature=22, rainfall=110, humidity=66),
        EnvironmentSnapshot(temperature=-5, rainfall=0, humidity=0),
    ])
    def test_sorted_descending(self, catalog, parcel, snapshot):
        scores = [r.score for r in rank_crops(parcel, snapshot, catalog)]

        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 1 for s in scores)

    def test_ties_keep_catalog_order(self, parcel):
        """Identical crops score the same and stay in insertion order."""
        crops = [
            CropProfile(
                id=str(i),
                name=f"Crop {i}",
                ideal_temperature=(20, 30),
                ideal_rainfall=(100, 200),
                ideal_humidity=(60, 80),
                growth_days=100,
                average_yield=1.0,
            )
            for i in range(6)
        ]

        rankings = rank_crops(parcel, EnvironmentSnapshot(temperature=40, rainfall=150, humidity=70),
                              CropCatalog(crops))

        assert [r.crop_id for r in rankings] == ["0", "1", "2", "3", "4", "5"]

    def test_parcel_does_not_change_scores(self, catalog, padi_weather):
        small = rank_crops(LandParcel(total_area=0.1), padi_weather, catalog)
        large = rank_crops(LandParcel(total_area=500), padi_weather, catalog)
        without = rank_crops(None, padi_weather, catalog)

        assert small == large == without

    def test_custom_scorer(self, synthetic_catalog, parcel):
        snapshot = EnvironmentSnapshot(temperature=25, rainfall=220, humidity=60)

        rankings = rank_crops(parcel, snapshot, synthetic_catalog, scorer=AbsoluteRangeScorer())

        # Alpha: rainfall 20 above a 100-wide range -> 0.9
        assert rankings[0].crop_id == "a"
        assert rankings[0].score == pytest.approx((1 + 0.9 + 1) / 3)

    def test_empty_catalog(self, parcel, padi_weather):
        assert rank_crops(parcel, padi_weather, CropCatalog([])) == []

    def test_degenerate_crop_range_fails(self, parcel, padi_weather):
        crop = CropProfile(
            id="x",
            name="Broken",
            ideal_temperature=(25, 25),
            ideal_rainfall=(100, 200),
            ideal_humidity=(60, 80),
            growth_days=100,
            average_yield=1.0,
        )
        with pytest.raises(DegenerateRangeError):
            rank_crops(parcel, padi_weather, CropCatalog([crop]))
