"""
API router for land optimization endpoints.
"""
from typing import Annotated

from fastapi import APIRouter, Query

from farmopt.api.dependencies import FarmServiceDep
from farmopt.api.v1.models.requests import ScenarioComparisonRequest
from farmopt.api.v1.models.responses import (
    LandDimensionsResponse,
    OptimizationResponse,
    ScenarioComparisonResponse,
)
from farmopt.domain.models import OptimizationParams
from farmopt.utils.field_geometry import golden_ratio_dimensions, square_plot_dimensions


router = APIRouter(
    tags=["optimization"],
    responses={429: {"description": "Rate limit exceeded"}},
)


@router.post(
    "/optimization",
    response_model=OptimizationResponse,
    summary="Optimize land use",
    description="""
    Estimate the optimal cultivated area and its economics.

    - Optimal area: heuristic shrinkage of the land by soil, seed, water and
      fertilizer factors, never above the available land
    - Expected yield: Cobb-Douglas production on the optimal area
    - Profit: yield x 1000 - area x 500 (default price and cost)
    - Resource efficiency: yield per unit of fertilizer-area (0 without fertilizer)
    - Sustainability: not bounded to 0-100
    - Crop allocation: fractions per value tier based on soil quality
    """,
)
async def optimize_land(
    params: OptimizationParams,
    farm_service: FarmServiceDep,
) -> OptimizationResponse:
    result, marginal = farm_service.optimize_land(params)
    return OptimizationResponse(
        **result.model_dump(),
        marginal_product_of_land=marginal,
    )


@router.post(
    "/optimization/scenarios",
    response_model=ScenarioComparisonResponse,
    summary="Compare optimization scenarios",
    description="""
    Optimize a base parameter set and each partial variation of it.

    Results are returned in request order with the base scenario first.
    """,
    responses={400: {"description": "A variation produces invalid parameters"}},
)
async def compare_scenarios(
    request: ScenarioComparisonRequest,
    farm_service: FarmServiceDep,
) -> ScenarioComparisonResponse:
    results = farm_service.compare_scenarios(request.base, request.variations)
    return ScenarioComparisonResponse(scenario_count=len(results), results=results)


@router.get(
    "/land/dimensions",
    response_model=LandDimensionsResponse,
    summary="Suggest plot dimensions",
)
async def get_land_dimensions(
    area: Annotated[float, Query(gt=0, description="Area in hectares")],
) -> LandDimensionsResponse:
    """Suggest golden-ratio and square plot dimensions for an area."""
    return LandDimensionsResponse(
        area=area,
        golden_ratio=golden_ratio_dimensions(area),
        square=square_plot_dimensions(area),
    )
