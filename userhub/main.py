import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userhub.api.error_handlers import register_error_handlers
from userhub.api.routes import users
from userhub.core.config import Settings, get_settings
from userhub.core.observability import setup_logging
from userhub.dao.base import get_table
from userhub.dao.user_dao import UserDAO
from userhub.services.user_mapper import UserMapper
from userhub.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    service: UserService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the FastAPI app. Collaborators are wired here explicitly;
    pass ``service`` to substitute the default DynamoDB-backed one.
    """
    settings = settings or get_settings()
    mapper = UserMapper()
    if service is None:
        service = UserService(UserDAO(get_table(settings)), mapper)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.app_name} {settings.app_version} started")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.user_service = service
    app.state.user_mapper = mapper

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(users.router, prefix="/users", tags=["Users"])

    register_error_handlers(app)

    # ── Health check ─────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()
