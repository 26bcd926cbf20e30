# main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routers import telemetry, ingest
from .core.config import settings
from .core.db_client import close_influxdb_client
from .core.exceptions import InvalidMetricType, InvalidThreshold, StorageUnavailable
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


# --- Manejadores de errores ---

async def client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected request %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

async def storage_unavailable_handler(request: Request, exc: StorageUnavailable) -> JSONResponse:
    # Las lecturas nunca llegan aquí (usan datos sintéticos); solo las escrituras
    logger.error("Storage unavailable on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Error al procesar los datos"},
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation error on %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Datos inválidos", "details": errors},
    )

async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Error al obtener los datos"},
    )


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="API for querying sensor telemetry series with threshold annotation, and for ingesting readings.",
        version="1.0.0",
    )

    application.include_router(telemetry.router, prefix=settings.API_V1_STR)
    application.include_router(ingest.router, prefix=settings.API_V1_STR)

    application.add_exception_handler(InvalidMetricType, client_error_handler)
    application.add_exception_handler(InvalidThreshold, client_error_handler)
    application.add_exception_handler(StorageUnavailable, storage_unavailable_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unexpected_exception_handler)

    @application.get("/", tags=["Root"])
    async def read_root():
        """Endpoint raíz para verificar que la API está funcionando."""
        return {"message": f"Welcome to the {settings.PROJECT_NAME}. Visit /docs for documentation."}

    @application.on_event("startup")
    async def startup_event():
        setup_logging(settings.LOG_LEVEL)
        logger.info("Starting %s (always_synthesize=%s)", settings.PROJECT_NAME, settings.ALWAYS_SYNTHESIZE)

    @application.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down %s...", settings.PROJECT_NAME)
        await close_influxdb_client()

    return application


app = create_app()
