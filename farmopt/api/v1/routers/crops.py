"""
API router for crop catalog and suitability endpoints.
"""
from typing import Annotated, Optional

import numpy as np
from fastapi import APIRouter, HTTPException, Path, Query

from farmopt.api.dependencies import FarmServiceDep
from farmopt.api.v1.models.requests import CropSuitabilityRequest
from farmopt.api.v1.models.responses import (
    CropComparisonResponse,
    CropListResponse,
    CropSuitabilityResponse,
    HarvestHistoryResponse,
    HistoryRecommendationResponse,
)
from farmopt.config import settings
from farmopt.domain.exceptions import CropNotFoundError
from farmopt.domain.models import CropProfile
from farmopt.services.domain.harvest_history import COMPARISON_MONTHS


router = APIRouter(
    prefix="/crops",
    tags=["crops"],
    responses={429: {"description": "Rate limit exceeded"}},
)

CropIdPath = Annotated[str, Path(description="Catalog id of the crop")]
MonthsQuery = Annotated[
    int,
    Query(ge=1, le=settings.history_max_months, description="Number of months to generate"),
]
SeedQuery = Annotated[
    Optional[int],
    Query(description="Random seed for reproducible history"),
]


@router.get(
    "",
    response_model=CropListResponse,
    summary="List crops",
)
async def list_crops(farm_service: FarmServiceDep) -> CropListResponse:
    """Return the crop catalog in catalog order."""
    crops = farm_service.list_crops()
    return CropListResponse(count=len(crops), crops=crops)


@router.get(
    "/comparison",
    response_model=CropComparisonResponse,
    summary="Compare crops by generated harvest history",
    description="""
    Generate a short demo harvest history for every catalog crop and report
    its average harvest and average harvest per hectare.
    """,
)
async def compare_crops(
    farm_service: FarmServiceDep,
    months: MonthsQuery = COMPARISON_MONTHS,
    seed: SeedQuery = None,
) -> CropComparisonResponse:
    crops = farm_service.compare_crop_yields(np.random.default_rng(seed), months=months)
    return CropComparisonResponse(months=months, crops=crops)


@router.get(
    "/{crop_id}",
    response_model=CropProfile,
    summary="Get a crop",
    responses={404: {"description": "Crop not found"}},
)
async def get_crop(crop_id: CropIdPath, farm_service: FarmServiceDep) -> CropProfile:
    """
    Get a single crop profile.

    Raises:
        HTTPException: If the crop is not in the catalog
    """
    try:
        return farm_service.get_crop(crop_id)
    except CropNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/suitability",
    response_model=CropSuitabilityResponse,
    summary="Rank crops for the current weather",
    description="""
    Score every catalog crop against a weather snapshot.

    Each crop's score is the mean of its temperature, rainfall and humidity
    scores, where a value inside the ideal range scores 1 and the score falls
    with the relative distance from the violated bound. Crops with equal
    scores keep catalog order.
    """,
)
async def rank_crops(
    request: CropSuitabilityRequest,
    farm_service: FarmServiceDep,
) -> CropSuitabilityResponse:
    rankings = farm_service.rank_crops(request.land, request.weather)
    return CropSuitabilityResponse(rankings=rankings)


@router.get(
    "/{crop_id}/history",
    response_model=HarvestHistoryResponse,
    summary="Generate demo harvest history",
    responses={404: {"description": "Crop not found"}},
)
async def get_harvest_history(
    crop_id: CropIdPath,
    farm_service: FarmServiceDep,
    months: MonthsQuery = settings.history_default_months,
    seed: SeedQuery = None,
) -> HarvestHistoryResponse:
    """
    Generate monthly demo harvest records ending this month.

    Raises:
        HTTPException: If the crop is not in the catalog
    """
    try:
        records = farm_service.harvest_history(
            crop_id, months, rng=np.random.default_rng(seed)
        )
    except CropNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return HarvestHistoryResponse(crop_id=crop_id, months=months, records=records)


@router.get(
    "/{crop_id}/history/recommendations",
    response_model=HistoryRecommendationResponse,
    summary="Rank crops against historical weather",
    responses={404: {"description": "Crop not found"}},
)
async def get_history_recommendations(
    crop_id: CropIdPath,
    farm_service: FarmServiceDep,
    months: MonthsQuery = settings.history_default_months,
    seed: SeedQuery = None,
) -> HistoryRecommendationResponse:
    """
    Generate a crop's demo history and rank all crops against its average weather.

    Raises:
        HTTPException: If the crop is not in the catalog
    """
    try:
        records = farm_service.harvest_history(
            crop_id, months, rng=np.random.default_rng(seed)
        )
    except CropNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    average_weather, rankings = farm_service.recommend_crops_from_history(records)
    return HistoryRecommendationResponse(
        crop_id=crop_id,
        average_weather=average_weather,
        rankings=rankings,
    )
