"""
Domain models for crops, land, weather and optimization results.

These models represent the core domain entities and should be independent
of any infrastructure concerns (HTTP layer, reference data loading, etc.).
"""
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, Field


class CropProfile(BaseModel):
    """Reference data for a single crop."""
    id: str
    name: str
    ideal_temperature: Tuple[float, float] = Field(
        description="Ideal temperature range (min, max) in °C"
    )
    ideal_rainfall: Tuple[float, float] = Field(
        description="Ideal rainfall range (min, max) in mm"
    )
    ideal_humidity: Tuple[float, float] = Field(
        description="Ideal relative humidity range (min, max) in %"
    )
    growth_days: int = Field(description="Days from planting to harvest")
    average_yield: float = Field(description="Historical average yield in tons/hectare")

    class Config:
        frozen = True
        allow_inf_nan = False


class EnvironmentSnapshot(BaseModel):
    """Point-in-time weather measurement."""
    temperature: float = Field(description="Average temperature in °C")
    rainfall: float = Field(description="Rainfall in mm")
    humidity: float = Field(description="Relative humidity in %")

    class Config:
        allow_inf_nan = False


class LandParcel(BaseModel):
    """A plot of land. Soil type and irrigation are descriptive only."""
    total_area: float = Field(gt=0, description="Total area in hectares")
    length: Optional[float] = Field(default=None, gt=0, description="Length in meters")
    width: Optional[float] = Field(default=None, gt=0, description="Width in meters")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    soil_type: Optional[str] = None
    irrigation: Optional[str] = None

    class Config:
        allow_inf_nan = False


class OptimizationParams(BaseModel):
    """Input vector of the Cobb-Douglas production model."""
    land_area: float = Field(gt=0, description="Land area in hectares")
    soil_quality: float = Field(ge=0, le=100, description="Soil quality index (0-100)")
    water_availability: float = Field(ge=0, le=100, description="Water availability index (0-100)")
    fertilizer_amount: float = Field(ge=0, description="Fertilizer amount in kg/hectare")
    seed_quality: float = Field(ge=0, le=100, description="Seed quality index (0-100)")
    crop_type: str = Field(default="", description="Crop label (free text)")

    class Config:
        allow_inf_nan = False


class OptimizationParamsOverride(BaseModel):
    """Partial variation of OptimizationParams used by scenario comparison."""
    land_area: Optional[float] = None
    soil_quality: Optional[float] = None
    water_availability: Optional[float] = None
    fertilizer_amount: Optional[float] = None
    seed_quality: Optional[float] = None
    crop_type: Optional[str] = None

    class Config:
        allow_inf_nan = False


class OptimizationResult(BaseModel):
    """Output of the land optimization orchestrator."""
    optimal_land_area: float = Field(description="Recommended cultivated area in hectares")
    expected_yield: float = Field(description="Expected yield in tons")
    profit_estimate: float = Field(description="Estimated profit (may be negative)")
    resource_efficiency: float = Field(description="Yield per unit of fertilizer-area")
    sustainability_score: float = Field(description="Sustainability score (not clamped)")
    recommended_crop_allocation: Dict[str, float] = Field(
        description="Allocation fractions per crop value tier, summing to 1.0"
    )


class FieldDimensions(BaseModel):
    """Rectangular plot dimensions."""
    length: float = Field(description="Length in meters")
    width: float = Field(description="Width in meters")


class YieldPrediction(BaseModel):
    """Output of the simplified yield predictor."""
    recommended_crop_id: Optional[str] = None
    predicted_yield: float = Field(description="Predicted yield in tons")
    optimized_area: float = Field(description="Optimized cultivated area in hectares")
    optimized_dimensions: Optional[FieldDimensions] = None
    confidence_score: float = Field(description="Confidence in percent (0-100)")
    yield_increase: float = Field(
        description="Percent change against the crop's historical average on the same area"
    )


class CropSuitabilityScore(BaseModel):
    """How well a crop fits an environment snapshot."""
    crop_id: str
    name: str
    score: float = Field(ge=0, le=1)


class HarvestRecord(BaseModel):
    """One month of (generated) harvest history."""
    period: str = Field(description="Month in YYYY-MM format")
    crop_id: str
    land_area: float = Field(description="Harvested area in hectares")
    harvest_yield: float = Field(description="Harvest in tons")
    weather: EnvironmentSnapshot


class CropYieldComparison(BaseModel):
    """Average harvest of one crop over a generated history."""
    crop_id: str
    name: str
    average_yield: float = Field(description="Mean monthly harvest in tons")
    average_yield_per_hectare: float = Field(description="Mean of harvest / land area in tons/hectare")
    growth_days: int
