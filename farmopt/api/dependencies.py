"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from farmopt.infrastructure.crop_catalog import CropCatalog, get_crop_catalog
from farmopt.services.domain.land_optimizer import LandOptimizer
from farmopt.services.domain.yield_predictor import YieldPredictor
from farmopt.services.application.farm_service import FarmPlanningService


def get_yield_predictor(
    catalog: Annotated[CropCatalog, Depends(get_crop_catalog)],
) -> YieldPredictor:
    """
    Dependency factory for YieldPredictor.

    Args:
        catalog: Crop catalog (injected)

    Returns:
        YieldPredictor instance seeded from settings
    """
    return YieldPredictor(catalog=catalog)


def get_land_optimizer() -> LandOptimizer:
    """
    Dependency factory for LandOptimizer.

    Returns:
        LandOptimizer instance
    """
    return LandOptimizer()


def get_farm_service(
    catalog: Annotated[CropCatalog, Depends(get_crop_catalog)],
    predictor: Annotated[YieldPredictor, Depends(get_yield_predictor)],
    optimizer: Annotated[LandOptimizer, Depends(get_land_optimizer)],
) -> FarmPlanningService:
    """
    Dependency factory for FarmPlanningService.

    Args:
        catalog: Crop catalog (injected)
        predictor: Yield predictor (injected)
        optimizer: Land optimizer (injected)

    Returns:
        FarmPlanningService instance
    """
    return FarmPlanningService(catalog=catalog, predictor=predictor, optimizer=optimizer)


# Type aliases for cleaner route signatures
FarmServiceDep = Annotated[FarmPlanningService, Depends(get_farm_service)]
