"""Global exception handlers rendering every failure in one JSON envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from loguru import logger
from starlette.responses import JSONResponse

from src.crudhub.core.errors import CrudHubError


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CrudHubError)
    async def crudhub_error_handler(request: Request, exc: CrudHubError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log("{} on {}: {}", exc.code, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.http_status,
            content={**exc.to_response(), "request_id": _request_id(request)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on {}: {}", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={
                "error": {
                    "code": "validation_error",
                    "message": "Request body failed validation",
                    "details": {"errors": jsonable_encoder(exc.errors())},
                },
                "request_id": _request_id(request),
            },
        )
