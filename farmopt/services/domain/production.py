"""
Domain service: closed-form production and land-area estimators.

Provides:
- Cobb-Douglas production function
- Optimal cultivated area (heuristic shrinkage model)
- Marginal product of land (forward finite difference)
"""
import logging
import math

from farmopt.domain.constants import AreaHeuristic, CobbDouglas
from farmopt.domain.models import OptimizationParams

logger = logging.getLogger(__name__)

DEFAULT_MARGINAL_STEP = 0.01


def cobb_douglas_production(params: OptimizationParams) -> float:
    """
    Estimate total output with a Cobb-Douglas production function.

    Y = A * L^0.4 * K^0.2 * F^0.2 * W^0.2 where
    - A = 1 + soil_quality / 100 (total factor productivity)
    - L = land_area in hectares (not normalized)
    - K = seed_quality / 100
    - F = fertilizer_amount / 100
    - W = water_availability / 100

    The elasticities sum to 1 (constant returns to scale). Any zero input
    gives zero output.

    Args:
        params: Production inputs

    Returns:
        Total production in tons

    Raises:
        ValueError: If land_area is negative
    """
    if params.land_area < 0:
        raise ValueError(f"Land area must not be negative, got {params.land_area}")

    productivity = 1 + params.soil_quality / 100
    land = params.land_area
    seed = params.seed_quality / 100
    fertilizer = params.fertilizer_amount / 100
    water = params.water_availability / 100

    return (
        productivity
        * land ** CobbDouglas.LAND
        * seed ** CobbDouglas.SEED
        * fertilizer ** CobbDouglas.FERTILIZER
        * water ** CobbDouglas.WATER
    )


def estimate_optimal_area(params: OptimizationParams) -> float:
    """
    Estimate the recommended cultivated sub-area.

    This is a heuristic multiplicative model, not a root of the production
    function's derivative:

        area = L * (soil/100 * seed/100) * sqrt(water/100)
                 * (1 + 0.2 * ln(1 + fertilizer/100))

    The square root and logarithm model diminishing returns of water and
    fertilizer. The result is clamped to the available land.

    Args:
        params: Production inputs

    Returns:
        Optimal area in hectares, never above params.land_area
    """
    base_factor = (params.soil_quality / 100) * (params.seed_quality / 100)
    water_factor = math.sqrt(params.water_availability / 100)
    fertilizer_factor = 1 + AreaHeuristic.FERTILIZER_RESPONSE * math.log(
        1 + params.fertilizer_amount / 100
    )

    optimal_area = params.land_area * base_factor * water_factor * fertilizer_factor
    logger.debug(
        f"Area factors: base={base_factor:.3f}, water={water_factor:.3f}, "
        f"fertilizer={fertilizer_factor:.3f}"
    )

    return min(optimal_area, params.land_area)


def marginal_product_of_land(
    params: OptimizationParams,
    step: float = DEFAULT_MARGINAL_STEP,
) -> float:
    """
    Approximate dY/dL with a forward finite difference.

    (Y(L + step) - Y(L)) / step. The result depends on the step size and is
    not the analytic derivative.

    Args:
        params: Production inputs
        step: Land increment in hectares

    Returns:
        Approximate marginal product of land in tons/hectare
    """
    if step <= 0:
        raise ValueError(f"Finite difference step must be positive, got {step}")

    base = cobb_douglas_production(params)
    shifted = cobb_douglas_production(
        params.model_copy(update={"land_area": params.land_area + step})
    )
    return (shifted - base) / step
