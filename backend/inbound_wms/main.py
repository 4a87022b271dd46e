"""
INBOUND WMS - FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inbound_wms.api.v1.router import api_router
from inbound_wms.config import get_settings
from inbound_wms.core.exceptions import InboundError
from inbound_wms.core.responses import inbound_error_handler
from inbound_wms.services.inbound import InboundServices, build_inbound_services

settings = get_settings()


def create_app(services: InboundServices | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: logging and the inbound service container."""
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        if getattr(app.state, "inbound_services", None) is None:
            app.state.inbound_services = build_inbound_services(settings)
        yield

    app = FastAPI(
        title="Inbound WMS",
        description="Inbound receiving and putaway: ASNs, receipts, putaway tasks",
        version="0.1.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    if services is not None:
        app.state.inbound_services = services
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InboundError, inbound_error_handler)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "inbound-wms"}

    return app


app = create_app()
