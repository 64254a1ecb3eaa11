"""
Infrastructure layer: read-only crop reference data.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import TypeAdapter

from farmopt.config import settings
from farmopt.domain.exceptions import CropNotFoundError
from farmopt.domain.models import CropProfile

logger = logging.getLogger(__name__)


# Built-in reference crops
DEFAULT_CROPS: List[CropProfile] = [
    CropProfile(
        id="1",
        name="Padi",
        ideal_temperature=(24, 30),
        ideal_rainfall=(200, 300),
        ideal_humidity=(70, 80),
        growth_days=120,
        average_yield=5.5,
    ),
    CropProfile(
        id="2",
        name="Jagung",
        ideal_temperature=(20, 30),
        ideal_rainfall=(120, 250),
        ideal_humidity=(65, 85),
        growth_days=100,
        average_yield=8.2,
    ),
    CropProfile(
        id="3",
        name="Kedelai",
        ideal_temperature=(20, 32),
        ideal_rainfall=(150, 250),
        ideal_humidity=(60, 75),
        growth_days=100,
        average_yield=2.5,
    ),
    CropProfile(
        id="4",
        name="Singkong",
        ideal_temperature=(25, 32),
        ideal_rainfall=(100, 200),
        ideal_humidity=(65, 80),
        growth_days=300,
        average_yield=20.0,
    ),
    CropProfile(
        id="5",
        name="Cabai",
        ideal_temperature=(21, 28),
        ideal_rainfall=(80, 120),
        ideal_humidity=(65, 70),
        growth_days=90,
        average_yield=8.0,
    ),
]

_crop_list_adapter = TypeAdapter(List[CropProfile])


class CropCatalog:
    """
    Ordered, read-only collection of crop profiles.

    Iteration follows insertion order, which is also the tie-break order
    used when ranking crops.
    """

    def __init__(self, crops: Iterable[CropProfile]):
        """
        Initialize the catalog.

        Args:
            crops: Crop profiles in catalog order

        Raises:
            ValueError: If two crops share an id
        """
        self._crops = tuple(crops)
        self._by_id = {}
        for crop in self._crops:
            if crop.id in self._by_id:
                raise ValueError(f"Duplicate crop id '{crop.id}' in catalog")
            self._by_id[crop.id] = crop

    @classmethod
    def default(cls) -> "CropCatalog":
        return cls(DEFAULT_CROPS)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "CropCatalog":
        """
        Load a catalog from a JSON array of crop profiles.

        Args:
            path: Path to the JSON file

        Returns:
            CropCatalog instance
        """
        raw = Path(path).read_text(encoding="utf-8")
        crops = _crop_list_adapter.validate_json(raw)
        logger.info(f"Loaded {len(crops)} crops from {path}")
        return cls(crops)

    def __iter__(self) -> Iterator[CropProfile]:
        return iter(self._crops)

    def __len__(self) -> int:
        return len(self._crops)

    def __contains__(self, crop_id: object) -> bool:
        return crop_id in self._by_id

    def get(self, crop_id: str) -> Optional[CropProfile]:
        """Return the crop with this id, or None."""
        return self._by_id.get(crop_id)

    def require(self, crop_id: str) -> CropProfile:
        """
        Return the crop with this id.

        Raises:
            CropNotFoundError: If the id is unknown
        """
        crop = self._by_id.get(crop_id)
        if crop is None:
            raise CropNotFoundError(crop_id)
        return crop


# Singleton instance
_crop_catalog: Optional[CropCatalog] = None


def get_crop_catalog() -> CropCatalog:
    """
    Get or create the singleton crop catalog.

    Uses settings.crop_catalog_path when set, otherwise the built-in crops.

    Returns:
        CropCatalog instance
    """
    global _crop_catalog
    if _crop_catalog is None:
        if settings.crop_catalog_path:
            _crop_catalog = CropCatalog.from_json_file(settings.crop_catalog_path)
        else:
            _crop_catalog = CropCatalog.default()
    return _crop_catalog
