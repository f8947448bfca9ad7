"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_tracker.api.catalog import router as catalog_router
from diet_tracker.api.goals import router as goals_router
from diet_tracker.api.meals import router as meals_router
from diet_tracker.api.serializers import error
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import (
    DietTrackerError,
    InvalidGoal,
    InvalidQuantity,
    InvalidReference,
    InvariantViolation,
    ReferenceNotFound,
)

API_PREFIX = "/api/v1"

_STATUS_BY_ERROR: list[tuple[type[DietTrackerError], int]] = [
    (ReferenceNotFound, status.HTTP_404_NOT_FOUND),
    (InvalidReference, status.HTTP_400_BAD_REQUEST),
    (InvalidQuantity, status.HTTP_400_BAD_REQUEST),
    (InvalidGoal, status.HTTP_400_BAD_REQUEST),
    (InvariantViolation, status.HTTP_409_CONFLICT),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Diet Tracker", debug=container.settings.debug)
    app.state.container = container

    app.include_router(meals_router, prefix=API_PREFIX)
    app.include_router(catalog_router, prefix=API_PREFIX)
    app.include_router(goals_router, prefix=API_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(DietTrackerError)
    async def handle_domain_error(
        request: Request, exc: DietTrackerError
    ) -> JSONResponse:
        status_code = error_status(exc)
        if status_code == status.HTTP_409_CONFLICT:
            logger.error(
                "Goal invariant enforcement failed: %s %s",
                request.url.path,
                exc,
                exc_info=exc.__cause__,
            )
        else:
            logger.warning(
                "Rejected request: %s %s: %s", request.method, request.url.path, exc
            )
        return JSONResponse(
            status_code=status_code, content=error(exc.code, str(exc))
        )

    return app


def error_status(exc: DietTrackerError) -> int:
    """Map a domain error to its HTTP status."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
