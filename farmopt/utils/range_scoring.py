"""
Ideal-range scoring strategies.

Two formulas score how close an environmental value is to a crop's ideal
range. They disagree outside the range and both are kept:
- absolute-range: distance measured against the width of the range
  (used by the yield predictor)
- relative-distance: distance measured against the violated bound
  (used by the crop suitability ranker)
"""
from dataclasses import dataclass
from typing import Protocol

from farmopt.domain.exceptions import DegenerateRangeError
from farmopt.domain.models import CropProfile, EnvironmentSnapshot


def _check_range(minimum: float, maximum: float) -> None:
    if minimum >= maximum:
        raise DegenerateRangeError(minimum, maximum)


def absolute_range_score(actual: float, minimum: float, maximum: float) -> float:
    """
    Score a value against an inclusive ideal range using the range width.

    Outside the range the score falls by 0.5 for every range-width of
    distance from the nearer bound.

    Args:
        actual: Observed value
        minimum: Lower bound of the ideal range
        maximum: Upper bound of the ideal range

    Returns:
        Score from 0 to 1

    Raises:
        DegenerateRangeError: If minimum >= maximum
    """
    _check_range(minimum, maximum)

    if minimum <= actual <= maximum:
        return 1.0

    distance = minimum - actual if actual < minimum else actual - maximum
    span = maximum - minimum
    return max(0.0, 1.0 - 0.5 * distance / span)


def relative_distance_score(actual: float, minimum: float, maximum: float) -> float:
    """
    Score a value against an inclusive ideal range using the violated bound.

    The relative distance is measured against the magnitude of the bound
    that was crossed; the score falls by 2 per unit of relative distance.
    A zero bound makes any violation infinitely far, scoring 0.

    Args:
        actual: Observed value
        minimum: Lower bound of the ideal range
        maximum: Upper bound of the ideal range

    Returns:
        Score from 0 to 1

    Raises:
        DegenerateRangeError: If minimum >= maximum
    """
    _check_range(minimum, maximum)

    if minimum <= actual <= maximum:
        return 1.0

    if actual < minimum:
        distance, bound = minimum - actual, minimum
    else:
        distance, bound = actual - maximum, maximum

    if bound == 0:
        return 0.0

    relative_distance = distance / abs(bound)
    return max(0.0, 1.0 - 2.0 * relative_distance)


class RangeScorer(Protocol):
    """Strategy scoring a value against an ideal range."""

    name: str

    def score(self, actual: float, minimum: float, maximum: float) -> float:
        ...


@dataclass(frozen=True)
class AbsoluteRangeScorer:
    """Range scorer backed by absolute_range_score."""
    name: str = "absolute-range"

    def score(self, actual: float, minimum: float, maximum: float) -> float:
        return absolute_range_score(actual, minimum, maximum)


@dataclass(frozen=True)
class RelativeDistanceScorer:
    """Range scorer backed by relative_distance_score."""
    name: str = "relative-distance"

    def score(self, actual: float, minimum: float, maximum: float) -> float:
        return relative_distance_score(actual, minimum, maximum)


RANGE_SCORERS: dict[str, RangeScorer] = {
    scorer.name: scorer
    for scorer in (AbsoluteRangeScorer(), RelativeDistanceScorer())
}


def get_range_scorer(name: str) -> RangeScorer:
    """
    Look up a range scorer by name.

    Args:
        name: "absolute-range" or "relative-distance"

    Returns:
        The matching scorer

    Raises:
        ValueError: If no scorer has that name
    """
    try:
        return RANGE_SCORERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown range scorer '{name}', expected one of {sorted(RANGE_SCORERS)}"
        ) from None


def environment_score(
    scorer: RangeScorer,
    crop: CropProfile,
    snapshot: EnvironmentSnapshot,
) -> float:
    """
    Average a scorer over temperature, rainfall and humidity.

    Args:
        scorer: Range scoring strategy
        crop: Crop whose ideal ranges are used
        snapshot: Observed weather

    Returns:
        Mean score from 0 to 1
    """
    scores = (
        scorer.score(snapshot.temperature, *crop.ideal_temperature),
        scorer.score(snapshot.rainfall, *crop.ideal_rainfall),
        scorer.score(snapshot.humidity, *crop.ideal_humidity),
    )
    return sum(scores) / len(scores)
