"""
FastAPI application for the HomeBrain command surface.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware

from homebrain import __version__
from homebrain.config import get_config
from homebrain.server.schemas import HealthResponse
from homebrain.services import Services, build_services

logger = logging.getLogger(__name__)


def get_services(request: Request) -> Services:
    """Services attached to the running application."""
    return request.app.state.services


def get_actor_id(actor_id: int = Header(..., alias="X-Actor-Id")) -> int:
    """Authenticated actor, as forwarded by the session layer in front of us."""
    return actor_id


def create_app(
    services: Optional[Services] = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        services: Pre-built collaborators (default: built from config)
        cors_origins: CORS allowed origins (default: from config)

    Returns:
        FastAPI application
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        yield
        await app.state.services.aclose()

    app = FastAPI(
        title="HomeBrain API",
        description="Voice and chat command interpretation for family coordination",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services or build_services(config)

    # CORS middleware
    origins = cors_origins or config.server.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from homebrain.server.routes_chat import router as chat_router
    from homebrain.server.routes_summary import router as summary_router
    from homebrain.server.routes_voice import router as voice_router

    app.include_router(voice_router, prefix="/voice", tags=["Voice"])
    app.include_router(chat_router, prefix="/chat", tags=["Chat"])
    app.include_router(summary_router, prefix="/summary", tags=["Summary"])

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request) -> HealthResponse:
        """Health check endpoint."""
        svc = get_services(request)
        return HealthResponse(
            status="ok" if svc.store.available else "degraded",
            version=__version__,
            store_available=svc.store.available,
            llm_model=svc.llm.model or None,
            stt_backend=svc.transcriber.backend.name,
        )

    return app


def run_server(
    host: str | None = None,
    port: int | None = None,
    reload: bool = False,
    workers: int = 1,
) -> None:
    """
    Run the server.

    Args:
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload (development)
        workers: Number of workers
    """
    import uvicorn

    config = get_config()

    uvicorn.run(
        "homebrain.server.app:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        reload=reload,
        workers=workers,
    )
