"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from artist_gallery.api.admin import router as admin_router
from artist_gallery.api.auth import router as auth_router
from artist_gallery.api.public import router as public_router
from artist_gallery.app_logging import configure_logging
from artist_gallery.containers import AppContainer
from artist_gallery.services.auth import NotAuthenticatedError
from artist_gallery.services.catalogue import PaintingValidationError
from artist_gallery.services.contact import ContactValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        logger.info(
            "Gallery ready: environment=%s paintings=%s",
            state_container.settings.environment,
            len(state_container.catalogue_service.list_paintings()),
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(public_router)
    app.include_router(auth_router)
    app.include_router(admin_router)

    @app.exception_handler(PaintingValidationError)
    @app.exception_handler(ContactValidationError)
    async def validation_error_handler(
        request: Request, exc: ValueError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(
        request: Request, exc: NotAuthenticatedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
