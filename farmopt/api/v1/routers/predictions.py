"""
API router for yield prediction endpoints.
"""
from fastapi import APIRouter

from farmopt.api.dependencies import FarmServiceDep
from farmopt.api.v1.models.requests import YieldPredictionRequest
from farmopt.domain.models import YieldPrediction


router = APIRouter(
    prefix="/predictions",
    tags=["predictions"],
    responses={429: {"description": "Rate limit exceeded"}},
)


@router.post(
    "/yield",
    response_model=YieldPrediction,
    summary="Predict crop yield",
    description="""
    Predict the harvest of a crop on a parcel under the given weather.

    The weather is scored against the crop's ideal ranges, the cultivated
    area is scaled by that score (up to the whole parcel) and the yield is
    the crop's historical average per hectare times score times area, with
    a random factor between 0.95 and 1.05.

    An unknown crop id returns an empty prediction rather than an error.
    """,
    responses={
        200: {
            "description": "Prediction computed",
            "content": {
                "application/json": {
                    "example": {
                        "recommended_crop_id": "1",
                        "predicted_yield": 13.75,
                        "optimized_area": 2.5,
                        "optimized_dimensions": {"length": 189.74, "width": 131.76},
                        "confidence_score": 95.0,
                        "yield_increase": 0.0,
                    }
                }
            }
        },
    },
)
async def predict_yield(
    request: YieldPredictionRequest,
    farm_service: FarmServiceDep,
) -> YieldPrediction:
    # Delegate to service layer (no business logic here)
    return farm_service.predict_yield(request.crop_id, request.land, request.weather)
