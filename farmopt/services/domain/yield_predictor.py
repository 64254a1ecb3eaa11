"""
Domain service: simplified yield prediction for a single crop.

Blends how well the weather suits the crop with the land area to estimate
the cultivated area, the harvest and a confidence score.
"""
from typing import Optional, Protocol
import logging

import numpy as np

from farmopt.config import settings
from farmopt.domain.constants import AreaHeuristic, Confidence, RandomFactor
from farmopt.domain.models import EnvironmentSnapshot, LandParcel, YieldPrediction
from farmopt.infrastructure.crop_catalog import CropCatalog
from farmopt.utils.field_geometry import aspect_ratio_dimensions
from farmopt.utils.range_scoring import AbsoluteRangeScorer, RangeScorer, environment_score

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything producing uniform floats in [0, 1) (numpy Generator, random.Random)."""

    def random(self) -> float:
        ...


class YieldPredictor:
    """
    Domain service predicting yield for a crop on a parcel.

    The predicted yield carries a uniform random factor in [0.95, 1.05];
    inject a seeded random source for reproducible results.
    """

    def __init__(
        self,
        catalog: CropCatalog,
        rng: Optional[RandomSource] = None,
        scorer: Optional[RangeScorer] = None,
    ):
        """
        Initialize the predictor.

        Args:
            catalog: Crop reference data
            rng: Random source (defaults to numpy seeded from settings)
            scorer: Range scorer (absolute-range by default)
        """
        self.catalog = catalog
        self.rng = rng if rng is not None else np.random.default_rng(
            settings.prediction_random_seed
        )
        self.scorer = scorer or AbsoluteRangeScorer()

    def predict(
        self,
        crop_id: str,
        parcel: LandParcel,
        snapshot: EnvironmentSnapshot,
    ) -> YieldPrediction:
        """
        Predict yield, optimized area and confidence for a crop.

        An unknown crop id is not an error: a zeroed prediction covering the
        whole parcel is returned.

        Args:
            crop_id: Catalog id of the crop
            parcel: Land to cultivate
            snapshot: Current weather

        Returns:
            YieldPrediction
        """
        land_area = parcel.total_area
        crop = self.catalog.get(crop_id)

        if crop is None:
            logger.warning(f"Crop '{crop_id}' not in catalog, returning empty prediction")
            return YieldPrediction(
                predicted_yield=0.0,
                optimized_area=land_area,
                confidence_score=0.0,
                yield_increase=0.0,
            )

        env_score = environment_score(self.scorer, crop, snapshot)

        area_ratio = min(1.0, AreaHeuristic.BASE_RATIO + env_score * AreaHeuristic.SCORE_WEIGHT)
        optimized_area = land_area * area_ratio

        random_factor = RandomFactor.LOW + float(self.rng.random()) * RandomFactor.SPREAD
        predicted_yield = crop.average_yield * env_score * optimized_area * random_factor

        confidence_score = min(
            Confidence.CEILING,
            Confidence.BASE + env_score * Confidence.SCORE_WEIGHT,
        )

        baseline = crop.average_yield * land_area
        if baseline == 0:
            logger.debug(f"Crop '{crop_id}' has no historical yield, yield increase set to 0.0")
            yield_increase = 0.0
        else:
            yield_increase = (predicted_yield - baseline) / baseline * 100

        logger.info(
            f"Predicted {predicted_yield:.2f}t of {crop.name} on {optimized_area:.2f}ha "
            f"(environment score {env_score:.3f})"
        )

        return YieldPrediction(
            recommended_crop_id=crop.id,
            predicted_yield=predicted_yield,
            optimized_area=optimized_area,
            optimized_dimensions=aspect_ratio_dimensions(optimized_area),
            confidence_score=confidence_score,
            yield_increase=yield_increase,
        )
