"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from kalorix.api.nutritionists import router as nutritionists_router
from kalorix.api.users import router as users_router
from kalorix.api.workflow import router as workflow_router
from kalorix.app_logging import configure_logging
from kalorix.containers import AppContainer
from kalorix.domain.errors import CalculationError
from kalorix.services.clients import InvalidClientForm
from kalorix.services.diets import DietNotFound
from kalorix.services.profiles import ProfileNotFound


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Kalorix")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(workflow_router)
    app.include_router(nutritionists_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(CalculationError)
    @app.exception_handler(InvalidClientForm)
    async def invalid_input(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning(
            "Rejected input: %s: %s",
            type(exc).__name__,
            exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.exception_handler(ProfileNotFound)
    @app.exception_handler(DietNotFound)
    async def not_found(request: Request, exc: LookupError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    return app
