"""
API request models using Pydantic.
"""
from typing import List
from pydantic import BaseModel, Field, model_validator

from farmopt.domain.models import (
    EnvironmentSnapshot,
    LandParcel,
    OptimizationParams,
    OptimizationParamsOverride,
)
from farmopt.utils.field_geometry import area_from_dimensions, dimensions_match_area


class LandInput(LandParcel):
    """Land parcel as submitted by a client."""

    @model_validator(mode="after")
    def check_dimensions(self) -> "LandInput":
        if (self.length is None) != (self.width is None):
            raise ValueError("length and width must be given together")
        if self.length is not None and not dimensions_match_area(
            self.total_area, self.length, self.width
        ):
            computed = area_from_dimensions(self.length, self.width)
            raise ValueError(
                f"length x width gives {computed:.4f} ha, "
                f"which does not match total_area {self.total_area} ha"
            )
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "total_area": 2.5,
                "length": 158,
                "width": 158,
                "soil_type": "loam",
                "irrigation": "drip",
            }
        }


class WeatherInput(EnvironmentSnapshot):
    """Weather snapshot as submitted by a client."""
    rainfall: float = Field(ge=0, description="Rainfall in mm", examples=[220])
    humidity: float = Field(ge=0, le=100, description="Relative humidity in %", examples=[72])


class CropSuitabilityRequest(BaseModel):
    """Request body for crop suitability ranking."""
    land: LandInput
    weather: WeatherInput


class YieldPredictionRequest(BaseModel):
    """Request body for yield prediction."""
    crop_id: str = Field(description="Catalog id of the crop", examples=["1"])
    land: LandInput
    weather: WeatherInput


class ScenarioComparisonRequest(BaseModel):
    """Request body for scenario comparison."""
    base: OptimizationParams
    variations: List[OptimizationParamsOverride] = Field(
        default_factory=list,
        description="Partial overrides of the base parameters, compared in order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "base": {
                    "land_area": 10,
                    "soil_quality": 70,
                    "water_availability": 60,
                    "fertilizer_amount": 50,
                    "seed_quality": 80,
                    "crop_type": "Wheat",
                },
                "variations": [
                    {"fertilizer_amount": 100},
                    {"water_availability": 90, "seed_quality": 95},
                ],
            }
        }
