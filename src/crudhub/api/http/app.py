"""FastAPI application setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.crudhub.api.http.app_data import ApplicationDependencies
from src.crudhub.api.http.error_handlers import register_error_handlers
from src.crudhub.api.http.routers import auth, checkout, health, products, projects
from src.crudhub.api.utils.app_startup import configure_logging
from src.crudhub.core.services import (
    DbManageService,
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    build_payment_provider,
)
from src.crudhub.runtime.context import get_config

configure_logging()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="crudhub",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "startup", "shutdown"]

app.add_middleware(SecurityHeadersMiddleware)

if get_config().app.environment == "production" and "*" in get_config().app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)

register_error_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    start = time.perf_counter()
    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=client_ip,
    ):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "code": "internal_error",
                        "message": "Internal Server Error",
                        "details": {},
                    },
                    "request_id": request_id,
                },
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


api_router = APIRouter(prefix="/api")
api_router.include_router(products.router)
api_router.include_router(auth.router)
api_router.include_router(checkout.router)
api_router.include_router(projects.router)

app.include_router(api_router)
app.include_router(health.router)


async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    if config.database.auto_create_tables:
        DbManageService(database_service).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        jwt_generation_service=JwtGeneratorService(),
        jwt_verify_service=JwtVerificationService(),
        payment_provider=build_payment_provider(config.payment),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()
