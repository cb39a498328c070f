"""FastAPI application factory"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from emi_calculator.api.dependencies import get_request_id
from emi_calculator.api.middleware import MetricsMiddleware, RequestIDMiddleware
from emi_calculator.api.v1 import emi
from emi_calculator.api.v1.schemas import ErrorResponse
from emi_calculator.config import settings
from emi_calculator.domain.exceptions import DomainException
from emi_calculator.domain.formatting import error_message
from emi_calculator.infrastructure.observability.logging import log_calculation, setup_logging
from emi_calculator.infrastructure.observability.metrics import record_rejection

# Setup structured logging
setup_logging(settings.log_level)

API_PREFIXES = ("v1/", "static/")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="EMI Calculator",
        description="Equated monthly installment calculator",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(DomainException)
    async def input_error_handler(request: Request, exc: DomainException):
        record_rejection(exc.kind)
        log_calculation(get_request_id(request), "rejected", kind=exc.kind, field=exc.field)
        body = ErrorResponse(error=exc.kind, field=exc.field, message=error_message(exc))
        return JSONResponse(status_code=422, content=body.model_dump())

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name, "message": "EMI Calculator is running"}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(emi.router, prefix="/v1", tags=["emi"])

    # Static assets, then the single page for every other GET
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    index_file = settings.static_dir / "index.html"

    # GET only: other methods on unmatched paths get 405 from this route, not 404
    @app.get("/", include_in_schema=False)
    @app.get("/{full_path:path}", include_in_schema=False)
    def page(full_path: str = ""):
        if full_path.startswith(API_PREFIXES) or not index_file.is_file():
            raise HTTPException(status_code=404, detail="Not found")
        return FileResponse(index_file)

    return app


app = create_app()
