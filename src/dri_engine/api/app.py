"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dri_engine.api.nutrition import router as nutrition_router
from dri_engine.app_logging import configure_logging
from dri_engine.containers import AppContainer
from dri_engine.domain.errors import DriEngineError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="DRI engine")
    app.state.container = container

    app.include_router(nutrition_router)

    @app.exception_handler(DriEngineError)
    async def engine_error_handler(
        request: Request, exc: DriEngineError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
