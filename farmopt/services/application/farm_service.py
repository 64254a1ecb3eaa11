"""
Application service: Orchestration layer for farm planning operations.
"""
from datetime import date
from typing import Iterable, List, Optional

from farmopt.domain.models import (
    CropProfile,
    CropSuitabilityScore,
    CropYieldComparison,
    EnvironmentSnapshot,
    HarvestRecord,
    LandParcel,
    OptimizationParams,
    OptimizationResult,
    YieldPrediction,
)
from farmopt.infrastructure.crop_catalog import CropCatalog
from farmopt.services.domain.crop_suitability import rank_crops
from farmopt.services.domain.harvest_history import (
    COMPARISON_MONTHS,
    average_environment,
    compare_crop_yields,
    generate_harvest_history,
)
from farmopt.services.domain.land_optimizer import LandOptimizer, ScenarioVariation
from farmopt.services.domain.yield_predictor import RandomSource, YieldPredictor


class FarmPlanningService:
    """
    Application service for farm planning operations.

    Coordinates the crop catalog with the domain services.
    Follows the application layer pattern - no business logic here,
    only coordination between reference data and domain layers.
    """

    def __init__(
        self,
        catalog: CropCatalog,
        predictor: YieldPredictor,
        optimizer: LandOptimizer,
    ):
        """
        Initialize the service with dependencies.

        Args:
            catalog: Crop reference data
            predictor: Simplified yield predictor
            optimizer: Land optimization orchestrator
        """
        self.catalog = catalog
        self.predictor = predictor
        self.optimizer = optimizer

    def list_crops(self) -> List[CropProfile]:
        return list(self.catalog)

    def get_crop(self, crop_id: str) -> CropProfile:
        """
        Get a crop by id.

        Raises:
            CropNotFoundError: If the crop is not in the catalog
        """
        return self.catalog.require(crop_id)

    def predict_yield(
        self,
        crop_id: str,
        parcel: LandParcel,
        snapshot: EnvironmentSnapshot,
    ) -> YieldPrediction:
        return self.predictor.predict(crop_id, parcel, snapshot)

    def rank_crops(
        self,
        parcel: Optional[LandParcel],
        snapshot: EnvironmentSnapshot,
    ) -> List[CropSuitabilityScore]:
        return rank_crops(parcel, snapshot, self.catalog)

    def optimize_land(self, params: OptimizationParams) -> tuple[OptimizationResult, float]:
        """
        Optimize land use and compute the marginal product of land.

        Args:
            params: Production inputs

        Returns:
            Tuple of (OptimizationResult, marginal product of land)
        """
        result = self.optimizer.optimize(params)
        marginal = self.optimizer.marginal_product(params)
        return result, marginal

    def compare_scenarios(
        self,
        base: OptimizationParams,
        variations: Iterable[ScenarioVariation],
    ) -> List[OptimizationResult]:
        return self.optimizer.compare_scenarios(base, variations)

    def harvest_history(
        self,
        crop_id: str,
        months: int,
        rng: RandomSource,
        today: Optional[date] = None,
    ) -> List[HarvestRecord]:
        """
        Generate demo harvest history for a catalog crop.

        Raises:
            CropNotFoundError: If the crop is not in the catalog
        """
        self.catalog.require(crop_id)
        return generate_harvest_history(
            crop_id=crop_id,
            catalog=self.catalog,
            months=months,
            rng=rng,
            today=today or date.today(),
        )

    def recommend_crops_from_history(
        self,
        history: List[HarvestRecord],
    ) -> tuple[EnvironmentSnapshot, List[CropSuitabilityScore]]:
        """
        Rank crops against the average weather of a harvest history.

        Args:
            history: Harvest records

        Returns:
            Tuple of (average weather, ranked crop scores)
        """
        snapshot = average_environment(history)
        return snapshot, rank_crops(None, snapshot, self.catalog)

    def compare_crop_yields(
        self,
        rng: RandomSource,
        months: int = COMPARISON_MONTHS,
        today: Optional[date] = None,
    ) -> List[CropYieldComparison]:
        return compare_crop_yields(
            catalog=self.catalog,
            months=months,
            rng=rng,
            today=today or date.today(),
        )
