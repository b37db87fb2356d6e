"""
FastAPI application factory.

* Registers routes for hospitals, distance and admin.
* Maps location and retrieval failures to HTTP errors.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, distance, hospitals
from src.api.schemas import ErrorResponse
from src.config import settings
from src.domain.exceptions import FacilityRetrievalError, LocationUnavailable

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Hospital finder starting (fetch delay=%.1fs, default limit=%d)",
        settings.facility_fetch_delay_seconds,
        settings.default_result_limit,
    )
    yield
    logger.info("Hospital finder stopped")


async def _location_unavailable_handler(request: Request, exc: LocationUnavailable):
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(detail=str(exc), kind=exc.kind.value).model_dump(),
    )


async def _retrieval_error_handler(request: Request, exc: FacilityRetrievalError):
    logger.exception("Facility retrieval failed", exc_info=exc)
    return JSONResponse(
        status_code=502,
        content=ErrorResponse(
            detail="Unable to retrieve nearby hospitals"
        ).model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Nearby Hospital Finder API",
        description=(
            "Ranks medical facilities around the user's position by "
            "great-circle distance and provides directions links."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Collaborator failures
    app.add_exception_handler(LocationUnavailable, _location_unavailable_handler)
    app.add_exception_handler(FacilityRetrievalError, _retrieval_error_handler)

    # Routers
    app.include_router(hospitals.router, prefix="/api/v1")
    app.include_router(distance.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
