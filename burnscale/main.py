from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import ProgrammingError, OperationalError, IntegrityError
from burnscale.core.config import settings
from burnscale.core.logging import configure_logging
from burnscale.api.routes import health, checkins, burnout, dashboard, customizations, ai
from burnscale.schemas.common import ErrorResponse
from burnscale.services.burnout import InvalidInput
import logging

def _error(status_code: int, error: str, detail: str, error_code: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, error_code=error_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())

def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    logger = logging.getLogger(__name__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        logger.info("Rejected check-in values on %s: %s", request.url.path, exc)
        return _error(422, "Invalid check-in values", str(exc), "INVALID_INPUT")

    @app.exception_handler(ProgrammingError)
    async def programming_error_handler(request: Request, exc: ProgrammingError):
        logger.error("Database programming error: %s", exc)
        if "does not exist" in str(exc):
            return _error(
                503,
                "Database schema mismatch detected",
                "The application schema is out of sync with the database. Please contact support.",
                "SCHEMA_MISMATCH",
            )
        return _error(500, "Database query error", "There was an error executing the database query", "DATABASE_ERROR")

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError):
        logger.error("Database operational error: %s", exc)
        return _error(
            503,
            "Database connection error",
            "Unable to connect to the database. Please try again later.",
            "DATABASE_CONNECTION_ERROR",
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.error("Database integrity error: %s", exc)
        return _error(400, "Data integrity violation", "The operation violates database constraints", "DATA_INTEGRITY_ERROR")

    # routes
    app.include_router(health.router)
    app.include_router(checkins.router)
    app.include_router(burnout.router)
    app.include_router(dashboard.router)
    app.include_router(customizations.router)
    app.include_router(ai.router)
    return app

app = create_app()
