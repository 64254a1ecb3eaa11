"""
Fixed model constants.

These values are part of the model contract rather than tunable inputs.
Centralizing them keeps the formulas in the services readable.
"""


class CobbDouglas:
    """Output elasticities of the production function (sum to 1.0)."""

    LAND = 0.4
    SEED = 0.2
    FERTILIZER = 0.2
    WATER = 0.2


class AreaHeuristic:
    """Coefficients of the optimal-area shrinkage model."""

    FERTILIZER_RESPONSE = 0.2

    # Simplified predictor: ratio = min(1, BASE_RATIO + score * SCORE_WEIGHT)
    BASE_RATIO = 0.8
    SCORE_WEIGHT = 0.4


class Confidence:
    """Confidence score bounds of the simplified predictor."""

    BASE = 60.0
    SCORE_WEIGHT = 35.0
    CEILING = 95.0


class RandomFactor:
    """Uniform range of the predictor's random yield factor."""

    LOW = 0.95
    SPREAD = 0.1


class Sustainability:
    """Weights of the sustainability score."""

    EFFICIENCY_WEIGHT = 0.5
    WATER_SAVING_WEIGHT = 50.0


class CropAllocation:
    """Soil-quality tiers and their crop allocation fractions."""

    HIGH_VALUE = "High-value"
    MEDIUM_VALUE = "Medium-value"
    LOW_VALUE = "Low-value"

    RICH_SOIL_THRESHOLD = 80.0
    FAIR_SOIL_THRESHOLD = 50.0

    # (high, medium, low)
    RICH_SOIL = (0.6, 0.3, 0.1)
    FAIR_SOIL = (0.3, 0.5, 0.2)
    POOR_SOIL = (0.1, 0.4, 0.5)


class FieldShape:
    """Plot shape constants."""

    SQUARE_METERS_PER_HECTARE = 10000.0
    PREDICTOR_ASPECT_RATIO = 1.2
    GOLDEN_RATIO = 1.618
