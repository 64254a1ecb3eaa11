"""
Domain service: demo harvest history.

Generates plausible monthly harvest records with a seasonal swing, used to
populate analytics views when no real history is available.
"""
from datetime import date
from typing import List
import logging
import math

import numpy as np

from farmopt.domain.models import CropYieldComparison, EnvironmentSnapshot, HarvestRecord
from farmopt.infrastructure.crop_catalog import CropCatalog
from farmopt.services.domain.yield_predictor import RandomSource

logger = logging.getLogger(__name__)

FALLBACK_BASE_YIELD = 5.0
COMPARISON_MONTHS = 4


def _months_before(day: date, months: int) -> tuple[int, int]:
    """Return (year, month) shifted back by a number of months."""
    index = day.year * 12 + (day.month - 1) - months
    return index // 12, index % 12 + 1


def _random_weather(rng: RandomSource) -> EnvironmentSnapshot:
    return EnvironmentSnapshot(
        temperature=24 + rng.random() * 6,
        rainfall=100 + rng.random() * 200,
        humidity=65 + rng.random() * 20,
    )


def generate_harvest_history(
    crop_id: str,
    catalog: CropCatalog,
    months: int,
    rng: RandomSource,
    today: date,
) -> List[HarvestRecord]:
    """
    Generate monthly harvest records ending at the current month.

    Yield follows the crop's average (5 t when the crop is unknown), scaled
    by a sinusoidal seasonal factor in [0.8, 1.2] and a random factor in
    [0.8, 1.2].

    Args:
        crop_id: Crop the history is generated for
        catalog: Crop reference data
        months: Number of months to generate
        rng: Random source
        today: Reference date; its month is the last record

    Returns:
        Records ordered oldest first
    """
    if months < 0:
        raise ValueError(f"Months must not be negative, got {months}")

    crop = catalog.get(crop_id)
    base_yield = crop.average_yield if crop else FALLBACK_BASE_YIELD

    records = []
    for offset in range(months):
        year, month = _months_before(today, offset)
        season_factor = math.sin(((month - 1) / 12) * 2 * math.pi) * 0.2 + 1

        records.append(HarvestRecord(
            period=f"{year}-{month:02d}",
            crop_id=crop_id,
            land_area=1 + rng.random() * 0.5,
            harvest_yield=base_yield * season_factor * (0.8 + rng.random() * 0.4),
            weather=_random_weather(rng),
        ))

    records.reverse()
    logger.debug(f"Generated {len(records)} months of history for crop '{crop_id}'")
    return records


def average_environment(records: List[HarvestRecord]) -> EnvironmentSnapshot:
    """
    Average the weather of a harvest history.

    Args:
        records: Harvest records

    Returns:
        EnvironmentSnapshot of mean temperature, rainfall and humidity

    Raises:
        ValueError: If records is empty
    """
    if not records:
        raise ValueError("Cannot average the weather of an empty history")

    weather = np.array([
        (r.weather.temperature, r.weather.rainfall, r.weather.humidity)
        for r in records
    ])
    temperature, rainfall, humidity = weather.mean(axis=0)

    return EnvironmentSnapshot(
        temperature=float(temperature),
        rainfall=float(rainfall),
        humidity=float(humidity),
    )


def compare_crop_yields(
    catalog: CropCatalog,
    months: int,
    rng: RandomSource,
    today: date,
) -> List[CropYieldComparison]:
    """
    Compare crops by the average harvest of a generated history.

    One history per crop is drawn from the shared random source, in catalog
    order.

    Args:
        catalog: Crop reference data
        months: Months of history per crop, at least 1
        rng: Random source
        today: Reference date

    Returns:
        One comparison per crop in catalog order

    Raises:
        ValueError: If months is less than 1
    """
    if months < 1:
        raise ValueError(f"Months must be at least 1, got {months}")

    comparisons = []
    for crop in catalog:
        records = generate_harvest_history(crop.id, catalog, months, rng, today)
        harvest = np.array([(r.harvest_yield, r.land_area) for r in records])

        comparisons.append(CropYieldComparison(
            crop_id=crop.id,
            name=crop.name,
            average_yield=float(harvest[:, 0].mean()),
            average_yield_per_hectare=float((harvest[:, 0] / harvest[:, 1]).mean()),
            growth_days=crop.growth_days,
        ))

    logger.info(f"Compared {len(comparisons)} crops over {months} months of history")
    return comparisons
