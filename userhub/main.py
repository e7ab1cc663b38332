# userhub/main.py

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from userhub.api.v1.api import api_router
from userhub.core.config import Settings, get_settings
from userhub.core.errors import UserHubError
from userhub.core.security import PasswordHasher, TokenIssuer, TokenVerifier
from userhub.db.init_db import init_db
from userhub.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.engine)
    yield
    app.state.engine.dispose()


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn any exception that escaped the routes into a generic 500.

    The error is logged once here and not re-raised, so the server does not
    log it a second time.
    """

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": GENERIC_ERROR_MESSAGE},
            )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Every failure leaves the API as ``{"message": ...}``.

    Server-side failures are logged and answered with a generic message;
    nothing internal reaches the client.
    """

    @app.exception_handler(UserHubError)
    async def userhub_error_handler(request: Request, exc: UserHubError):
        if exc.status_code >= 500:
            logger.error(
                "%s on %s %s: %s",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
            )
            return JSONResponse(status_code=exc.status_code, content={"message": GENERIC_ERROR_MESSAGE})
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request body", "errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    app.add_middleware(UnhandledErrorMiddleware)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- COMPONENTS ----------
    # Built once from explicit settings; request dependencies read them
    # from app.state.
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.password_hash_rounds)
    app.state.token_issuer = TokenIssuer(
        settings.jwt_secret,
        lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        algorithm=settings.jwt_algorithm,
    )
    app.state.token_verifier = TokenVerifier(settings.jwt_secret, algorithm=settings.jwt_algorithm)

    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; registration, login and protected routes will fail")

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin).rstrip("/") for origin in settings.backend_cors_origins],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app

