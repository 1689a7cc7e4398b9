"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from strawberry.fastapi import GraphQLRouter

from photo_share.adapters.in_memory_photo_repository import PhotoStoreCorruptedError
from photo_share.api.console import router as console_router
from photo_share.api.schema import create_schema
from photo_share.app_logging import configure_logging
from photo_share.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Photo API ready at %s", container.settings.playground_url)
        yield
        logger.info(
            "Photo API stopping",
            extra={"photo_count": _safe_photo_count(app.state.container)},
        )

    async def get_context(request: Request) -> dict[str, object]:
        state_container: AppContainer = request.app.state.container
        return {"photo_service": state_container.photo_service}

    graphql_router = GraphQLRouter(
        create_schema(container.settings.environment),
        path="/",
        graphql_ide=None,
        allow_queries_via_get=False,
        context_getter=get_context,
    )

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    # Console GET / must be registered ahead of the GraphQL router's own GET /.
    app.include_router(console_router)
    app.include_router(graphql_router, tags=["graphql"])

    @app.get("/health")
    async def health(request: Request) -> JSONResponse:
        """Report whether the photo store is still consistent."""
        state_container: AppContainer = request.app.state.container
        if state_container.photo_service.is_healthy():
            return JSONResponse({"status": "ok"})
        return JSONResponse(
            {"status": "unhealthy"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return app


def _safe_photo_count(container: AppContainer) -> int | None:
    """Return the store size, or None when the store is corrupted."""
    try:
        return container.photo_service.total_photos()
    except PhotoStoreCorruptedError:
        return None
