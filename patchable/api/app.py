"""FastAPI application factory.

Run with ``uvicorn --factory patchable.api.app:create_app``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from patchable import __version__
from patchable.api.dependencies import get_settings
from patchable.api.exceptions import PatchableAPIError
from patchable.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from patchable.api.routes import register_routes
from patchable.config.settings import Settings
from patchable.observability.logging import configure_from, get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the loaded configuration

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_from(settings.observability.logging)

    app = FastAPI(
        title=settings.api.title,
        description="Partial updates of typed models from JSON documents",
        version=__version__,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    register_routes(app, settings)

    logger.info("app_created", debug=settings.debug)
    return app


def _error_response(status_code: int, body: ErrorBody) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(PatchableAPIError)
    async def patchable_api_error_handler(
        request: Request, exc: PatchableAPIError
    ) -> JSONResponse:
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(
            exc.status_code,
            ErrorBody(code=exc.error_code, message=exc.message, details=exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("request_validation_error", path=request.url.path)
        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            400,
            ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message="Request validation failed",
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "unexpected_error",
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(
            500,
            ErrorBody(code=ErrorCode.INTERNAL_ERROR, message="An unexpected error occurred"),
        )
