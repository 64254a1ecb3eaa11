"""
API response models using Pydantic.
"""
from typing import List
from pydantic import BaseModel, Field

from farmopt.domain.models import (
    CropProfile,
    CropSuitabilityScore,
    CropYieldComparison,
    EnvironmentSnapshot,
    FieldDimensions,
    HarvestRecord,
    OptimizationResult,
)


class CropListResponse(BaseModel):
    """Response model for the crop catalog endpoint."""
    count: int = Field(description="Number of crops in the catalog")
    crops: List[CropProfile] = Field(description="Crops in catalog order")


class CropSuitabilityResponse(BaseModel):
    """Response model for crop suitability ranking."""
    rankings: List[CropSuitabilityScore] = Field(
        description="Crops sorted from most to least suitable"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "rankings": [
                    {"crop_id": "1", "name": "Padi", "score": 1.0},
                    {"crop_id": "4", "name": "Singkong", "score": 0.9333},
                ]
            }
        }


class OptimizationResponse(OptimizationResult):
    """Optimization result with the marginal product of land."""
    marginal_product_of_land: float = Field(
        description="Approximate extra tons per extra hectare at the given land area"
    )


class ScenarioComparisonResponse(BaseModel):
    """Response model for scenario comparison."""
    scenario_count: int = Field(description="Base scenario plus one per variation")
    results: List[OptimizationResult] = Field(
        description="Base result first, then one result per variation in request order"
    )


class LandDimensionsResponse(BaseModel):
    """Response model for plot dimension suggestions."""
    area: float = Field(description="Area in hectares")
    golden_ratio: FieldDimensions = Field(description="1.618:1 rectangle, whole meters")
    square: FieldDimensions = Field(description="Square plot, whole meters")


class HarvestHistoryResponse(BaseModel):
    """Response model for generated harvest history."""
    crop_id: str
    months: int
    records: List[HarvestRecord] = Field(description="Monthly records, oldest first")


class HistoryRecommendationResponse(BaseModel):
    """Crop ranking against the average weather of a harvest history."""
    crop_id: str
    average_weather: EnvironmentSnapshot
    rankings: List[CropSuitabilityScore]


class CropComparisonResponse(BaseModel):
    """Response model for crop yield comparison."""
    months: int = Field(description="Months of generated history per crop")
    crops: List[CropYieldComparison] = Field(description="One entry per crop in catalog order")
