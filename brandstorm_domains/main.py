"""
FastAPI Main Application Entry Point
"""
from contextlib import asynccontextmanager
from typing import Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from brandstorm_domains.api.routes import api_router
from brandstorm_domains.api.tools import DomainTools
from brandstorm_domains.config.logging_config import setup_logging
from brandstorm_domains.config.settings import settings
from brandstorm_domains.core.ai_manager import AIManager
from brandstorm_domains.core.exceptions import DomainSuggestException
from brandstorm_domains.services.domain_service import DomainService

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - startup and shutdown
    """
    logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}")

    owns_service = getattr(app.state, "tools", None) is None

    try:
        if owns_service:
            service = DomainService(settings)
            app.state.tools = DomainTools(service)
            logger.info(f"✅ Domain service ready ({service.provider_name})")

        yield

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}", exc_info=True)
        raise
    finally:
        logger.info("🛑 Shutting down...")
        tools = getattr(app.state, "tools", None)
        if owns_service and tools is not None:
            await tools.service.close()
            await AIManager.cleanup()
            app.state.tools = None
        logger.info("✅ Cleanup complete")


def create_app(tools: Optional[DomainTools] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        tools: Pre-built tool surface (created at startup when omitted)
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Domain name suggestion and availability API",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None
    )
    app.state.tools = tools

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root() -> Dict:
        """Root endpoint"""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs" if settings.debug else "disabled"
        }

    @app.exception_handler(DomainSuggestException)
    async def domain_exception_handler(request: Request, exc: DomainSuggestException):
        """Handle application exceptions raised outside the tool layer"""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    return app


app = create_app()


def run(host: Optional[str] = None, port: Optional[int] = None):
    """Run the HTTP server"""
    uvicorn.run(
        "brandstorm_domains.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
