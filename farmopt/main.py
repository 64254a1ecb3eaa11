"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from farmopt.config import settings
from farmopt.middleware.error_handler import ErrorHandlerMiddleware
from farmopt.api.v1.routers import crops, optimization, predictions
from farmopt.infrastructure.crop_catalog import get_crop_catalog

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# Rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_requests}/minute"],
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Economics: price={settings.average_crop_price}/t, "
                f"cost={settings.cost_per_hectare}/ha")
    logger.info(f"Crop catalog: {len(get_crop_catalog())} crops "
                f"({settings.crop_catalog_path or 'built-in'})")
    logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute")

    yield

    # Shutdown
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Land-Yield Optimization API for Farm Planning

    This API estimates how much land to cultivate and what it will yield,
    using closed-form agronomic formulas.

    ## Features

    - **Land Optimization**: Optimal cultivated area, expected yield, profit,
      resource efficiency and sustainability from a Cobb-Douglas model
    - **Scenario Comparison**: Re-run the optimization over parameter variations
    - **Yield Prediction**: Weather-aware yield estimate for a catalog crop
    - **Crop Suitability**: Rank crops by how well the weather matches their
      ideal ranges
    - **Rate Limiting**: Protects the API from abuse

    ## Optimization Model

    1. Optimal area = land x soil/100 x seed/100 x sqrt(water/100)
       x (1 + 0.2 ln(1 + fertilizer/100)), capped at the land area
    2. Expected yield = (1 + soil/100) x L^0.4 x (seed/100)^0.2
       x (fertilizer/100)^0.2 x (water/100)^0.2 on the optimal area
    3. Profit, efficiency and sustainability follow from the yield
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(crops.router, prefix="/api/v1")
app.include_router(predictions.router, prefix="/api/v1")
app.include_router(optimization.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
