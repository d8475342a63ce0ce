"""
FastAPI Application Factory

Creates the read-only navigation API over one navigation session.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import structlog

from marketplace_navigator.config import Settings, get_settings
from marketplace_navigator.config.logging import configure_logging
from marketplace_navigator.diagram import DiagramRenderer
from marketplace_navigator.ingestion import NavigationSession, SnapshotLoader, SnapshotLoadError
from marketplace_navigator.navigation import RelationalNavigator
from marketplace_navigator.serving.api.middleware import RequestLoggingMiddleware
from marketplace_navigator.serving.api.routes import (
    carts_router,
    catalog_router,
    health_router,
    orders_router,
    promotions_router,
    schema_router,
)

logger = structlog.get_logger(__name__)


def install_session(app: FastAPI, session: NavigationSession, settings: Settings) -> None:
    """Make a loaded session available to the routes"""
    app.state.navigator = RelationalNavigator(session.snapshot, settings=settings)
    app.state.diagram_source = session.diagram_source
    app.state.load_result = session.result


def create_api_app(
    session: Optional[NavigationSession] = None,
    settings: Optional[Settings] = None,
    diagram_renderer: Optional[DiagramRenderer] = None,
    loader: Optional[SnapshotLoader] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        session: Already loaded session; loaded at startup when omitted
        settings: Application settings (defaults to cached settings)
        diagram_renderer: Diagram rendering collaborator, if any
        loader: Loader used at startup (defaults to the configured files)
        
    Returns:
        Configured FastAPI app instance
    """
    settings = settings or get_settings()
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings=settings)
        logger.info("Starting Marketplace Navigator API")
        
        if app.state.navigator is None:
            try:
                loaded = await (loader or SnapshotLoader(settings=settings)).load()
                install_session(app, loaded, settings)
            except SnapshotLoadError as e:
                logger.error("Snapshot load failed, serving without data", error=str(e))
        
        yield
        
        logger.info("Shutting down...")
    
    app = FastAPI(
        title="Marketplace Navigator API",
        description="Read-only relational navigation over a marketplace snapshot",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    
    app.state.settings = settings
    app.state.navigator = None
    app.state.diagram_source = None
    app.state.load_result = None
    app.state.diagram_renderer = diagram_renderer
    if session is not None:
        install_session(app, session, settings)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestLoggingMiddleware)
    
    app.include_router(health_router, prefix="/api/v1", tags=["Health"])
    app.include_router(catalog_router, prefix="/api/v1", tags=["Catalog"])
    app.include_router(orders_router, prefix="/api/v1", tags=["Orders"])
    app.include_router(promotions_router, prefix="/api/v1/promotions", tags=["Promotions"])
    app.include_router(carts_router, prefix="/api/v1/carts", tags=["Carts"])
    app.include_router(schema_router, prefix="/api/v1", tags=["Schema"])
    
    @app.get("/api/v1/info")
    async def api_info():
        """API information endpoint."""
        return {
            "name": "Marketplace Navigator API",
            "version": settings.version,
            "environment": settings.app_env,
            "tables": app.state.navigator.sections() if app.state.navigator else [],
        }
    
    return app
