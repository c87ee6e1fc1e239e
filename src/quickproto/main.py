"""
Prototype Service - Main Entry Point
HTTP API for answer-driven UI prototypes
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .core import LogContext, Settings, configure_logging, create_container, get_logger, get_settings, request_id_from_header
from .handlers import PrototypeHandler, router as prototypes_router
from .monitoring import metrics_collector
from .services import PrototypeService


logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with its dependencies wired."""
    settings = settings or get_settings()
    container = create_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "starting",
            storage_backend=settings.storage_backend,
            host=settings.host,
            port=settings.port,
        )
        yield
        logger.info("stopped")

    app = FastAPI(
        title="quickproto",
        description="Five answers in, clickable UI prototype out",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.prototype_handler = PrototypeHandler(container.get(PrototypeService))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        request_id = request_id_from_header(request.headers.get("X-Request-ID"))
        with LogContext(request_id=request_id, path=request.url.path):
            response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint"""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/metrics")
    def metrics() -> Response:
        """Prometheus metrics"""
        return Response(content=metrics_collector.get_metrics(), media_type=metrics_collector.content_type)

    app.include_router(prototypes_router)
    return app


def serve() -> None:
    """Entry point - run the HTTP server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
