"""
Domain service: rank catalog crops by how well they suit the weather.
"""
from typing import Iterable, List, Optional
import logging

from farmopt.domain.models import (
    CropProfile,
    CropSuitabilityScore,
    EnvironmentSnapshot,
    LandParcel,
)
from farmopt.utils.range_scoring import (
    RangeScorer,
    RelativeDistanceScorer,
    environment_score,
)

logger = logging.getLogger(__name__)


def rank_crops(
    parcel: Optional[LandParcel],
    snapshot: EnvironmentSnapshot,
    catalog: Iterable[CropProfile],
    scorer: Optional[RangeScorer] = None,
) -> List[CropSuitabilityScore]:
    """
    Score every catalog crop against a weather snapshot.

    Each score is the mean relative-distance score over temperature,
    rainfall and humidity. The parcel is accepted for context only and
    does not change the scores.

    Args:
        parcel: Land the ranking is made for
        snapshot: Observed weather
        catalog: Crops in catalog order
        scorer: Range scorer (relative-distance by default)

    Returns:
        Scores sorted from best to worst; equal scores keep catalog order
    """
    scorer = scorer or RelativeDistanceScorer()

    scores = [
        CropSuitabilityScore(
            crop_id=crop.id,
            name=crop.name,
            score=environment_score(scorer, crop, snapshot),
        )
        for crop in catalog
    ]

    # sorted() is stable, so ties stay in catalog order
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)

    if ranked:
        logger.debug(f"Best crop: {ranked[0].name} ({ranked[0].score:.3f})")
    return ranked
