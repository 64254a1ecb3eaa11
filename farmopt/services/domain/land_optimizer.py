"""
Domain service: land optimization orchestrator and scenario comparison.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from dataclasses import dataclass
import logging

from farmopt.config import settings
from farmopt.domain.constants import CropAllocation, Sustainability
from farmopt.domain.models import (
    OptimizationParams,
    OptimizationParamsOverride,
    OptimizationResult,
)
from farmopt.services.domain.production import (
    cobb_douglas_production,
    estimate_optimal_area,
    marginal_product_of_land,
)

logger = logging.getLogger(__name__)

ScenarioVariation = Union[OptimizationParamsOverride, Mapping[str, Any]]


@dataclass
class OptimizerConfig:
    """Economic constants of the land optimization model."""

    average_crop_price: float = 1000.0
    """Price per ton of harvested crop"""

    cost_per_hectare: float = 500.0
    """Cultivation cost per hectare"""

    marginal_product_step: float = 0.01
    """Finite difference step in hectares"""


def recommend_crop_allocation(soil_quality: float) -> Dict[str, float]:
    """
    Split land across crop value tiers based on soil quality.

    Richer soil supports a larger share of high-value crops.

    Args:
        soil_quality: Soil quality index (0-100)

    Returns:
        Mapping of tier label to fraction; fractions sum to 1.0
    """
    if soil_quality > CropAllocation.RICH_SOIL_THRESHOLD:
        high, medium, low = CropAllocation.RICH_SOIL
    elif soil_quality > CropAllocation.FAIR_SOIL_THRESHOLD:
        high, medium, low = CropAllocation.FAIR_SOIL
    else:
        high, medium, low = CropAllocation.POOR_SOIL

    return {
        CropAllocation.HIGH_VALUE: high,
        CropAllocation.MEDIUM_VALUE: medium,
        CropAllocation.LOW_VALUE: low,
    }


def merge_scenario(
    base: OptimizationParams,
    variation: ScenarioVariation,
) -> OptimizationParams:
    """
    Apply a partial variation on top of base parameters.

    Args:
        base: Base parameters
        variation: Override model or mapping of field name to value

    Returns:
        Validated OptimizationParams

    Raises:
        pydantic.ValidationError: If the merged parameters are invalid
    """
    if isinstance(variation, OptimizationParamsOverride):
        changes = variation.model_dump(exclude_none=True)
    else:
        changes = dict(variation)

    unknown = set(changes) - set(OptimizationParams.model_fields)
    if unknown:
        raise ValueError(f"Unknown scenario fields: {sorted(unknown)}")

    return OptimizationParams.model_validate({**base.model_dump(), **changes})


class LandOptimizer:
    """
    Domain service computing the optimal cultivated area and its economics.

    Composes the production, optimal-area and efficiency formulas into a
    single OptimizationResult. All computations are closed-form; nothing is
    searched or iterated.
    """

    def __init__(self, config: Optional[OptimizerConfig] = None):
        """
        Initialize the optimizer.

        Args:
            config: Economic constants (defaults come from settings)
        """
        if config:
            self.config = config
        else:
            self.config = OptimizerConfig(
                average_crop_price=settings.average_crop_price,
                cost_per_hectare=settings.cost_per_hectare,
                marginal_product_step=settings.marginal_product_step,
            )

    def optimize(self, params: OptimizationParams) -> OptimizationResult:
        """
        Run the full land optimization for one parameter set.

        Steps:
        1. Estimate the optimal area
        2. Estimate production on that area
        3. Profit = yield * price - area * cost
        4. Resource efficiency = yield / (fertilizer * area / 100)
        5. Sustainability from efficiency and water savings
        6. Crop tier allocation from soil quality

        Args:
            params: Production inputs

        Returns:
            OptimizationResult
        """
        optimal_land_area = estimate_optimal_area(params)

        optimized_params = params.model_copy(update={"land_area": optimal_land_area})
        expected_yield = cobb_douglas_production(optimized_params)

        profit_estimate = (
            expected_yield * self.config.average_crop_price
            - optimal_land_area * self.config.cost_per_hectare
        )

        resource_efficiency = self._resource_efficiency(
            expected_yield, params.fertilizer_amount, optimal_land_area
        )

        # Not clamped: efficiency is unbounded
        sustainability_score = (
            resource_efficiency * Sustainability.EFFICIENCY_WEIGHT
            + (100 - params.water_availability) / 100 * Sustainability.WATER_SAVING_WEIGHT
        )

        logger.info(
            f"Optimized {params.land_area:.2f}ha ({params.crop_type or 'unspecified crop'}): "
            f"optimal={optimal_land_area:.2f}ha, yield={expected_yield:.2f}t"
        )

        return OptimizationResult(
            optimal_land_area=optimal_land_area,
            expected_yield=expected_yield,
            profit_estimate=profit_estimate,
            resource_efficiency=resource_efficiency,
            sustainability_score=sustainability_score,
            recommended_crop_allocation=recommend_crop_allocation(params.soil_quality),
        )

    def marginal_product(self, params: OptimizationParams) -> float:
        """Marginal product of land using the configured step."""
        return marginal_product_of_land(params, step=self.config.marginal_product_step)

    def compare_scenarios(
        self,
        base: OptimizationParams,
        variations: Iterable[ScenarioVariation],
    ) -> List[OptimizationResult]:
        """
        Optimize a base case and each variation of it.

        Args:
            base: Base parameters
            variations: Partial overrides, applied to base one at a time

        Returns:
            Results in order: base first, then one per variation
        """
        results = [self.optimize(base)]

        for variation in variations:
            results.append(self.optimize(merge_scenario(base, variation)))

        logger.info(f"Compared {len(results)} scenarios")
        return results

    def _resource_efficiency(
        self,
        expected_yield: float,
        fertilizer_amount: float,
        optimal_land_area: float,
    ) -> float:
        """
        Yield per unit of fertilizer-area.

        Defined as 0.0 when no fertilizer is used or no land is cultivated.
        """
        denominator = fertilizer_amount * optimal_land_area / 100
        if denominator == 0:
            logger.debug("Resource efficiency undefined (zero fertilizer or area), using 0.0")
            return 0.0
        return expected_yield / denominator
