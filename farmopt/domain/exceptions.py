"""
Domain exceptions raised by the land-yield optimization engine.
"""


class DomainError(Exception):
    """Base class for domain rule violations."""
    pass


class DegenerateRangeError(DomainError, ValueError):
    """Raised when an ideal range has minimum >= maximum."""

    def __init__(self, minimum: float, maximum: float):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Ideal range [{minimum}, {maximum}] is degenerate: minimum must be below maximum"
        )


class CropNotFoundError(DomainError, LookupError):
    """Raised when a crop id is not present in the catalog."""

    def __init__(self, crop_id: str):
        self.crop_id = crop_id
        super().__init__(f"Crop '{crop_id}' not found in catalog")
