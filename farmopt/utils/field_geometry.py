"""
Field geometry helpers: area conversions and plot dimension formulas.
"""
import math

from farmopt.domain.constants import FieldShape
from farmopt.domain.models import FieldDimensions


def hectares_to_square_meters(area: float) -> float:
    return area * FieldShape.SQUARE_METERS_PER_HECTARE


def area_from_dimensions(length: float, width: float) -> float:
    """
    Calculate the area of a rectangular plot.

    Args:
        length: Length in meters
        width: Width in meters

    Returns:
        Area in hectares
    """
    return (length * width) / FieldShape.SQUARE_METERS_PER_HECTARE


def aspect_ratio_dimensions(area: float) -> FieldDimensions:
    """
    Dimensions used by the yield predictor.

    Takes the side of a square of the given area and stretches it by a
    fixed 1.2 ratio (length = side * 1.2, width = side / 1.2).

    Args:
        area: Area in hectares

    Returns:
        FieldDimensions in meters
    """
    side = math.sqrt(hectares_to_square_meters(area))
    ratio = FieldShape.PREDICTOR_ASPECT_RATIO
    return FieldDimensions(length=side * ratio, width=side / ratio)


def golden_ratio_dimensions(area: float) -> FieldDimensions:
    """
    Rectangle of the given area with a 1.618:1 side ratio.

    Args:
        area: Area in hectares

    Returns:
        FieldDimensions rounded to whole meters
    """
    ratio = FieldShape.GOLDEN_RATIO
    width = math.sqrt(hectares_to_square_meters(area) / ratio)
    length = width * ratio
    return FieldDimensions(length=round(length), width=round(width))


def square_plot_dimensions(area: float) -> FieldDimensions:
    """
    Square plot of the given area, sides rounded to whole meters.

    Args:
        area: Area in hectares

    Returns:
        FieldDimensions with equal length and width
    """
    side = round(math.sqrt(hectares_to_square_meters(area)))
    return FieldDimensions(length=side, width=side)


def dimensions_match_area(
    area: float,
    length: float,
    width: float,
    absolute_tolerance: float = 0.01,
    relative_tolerance: float = 0.01,
) -> bool:
    """
    Check that length x width agrees with a declared area.

    Sides are usually rounded to whole meters, so the comparison allows
    the larger of an absolute (hectares) and a relative tolerance.

    Args:
        area: Declared area in hectares
        length: Length in meters
        width: Width in meters
        absolute_tolerance: Allowed difference in hectares
        relative_tolerance: Allowed difference as a fraction of area

    Returns:
        True if the dimensions are consistent with the area
    """
    tolerance = max(absolute_tolerance, relative_tolerance * area)
    return abs(area_from_dimensions(length, width) - area) <= tolerance
