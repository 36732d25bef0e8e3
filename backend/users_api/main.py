import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.users import router as users_router
from users_api.config import settings
from users_api.database import create_pool
from users_api.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    app.state.pool = create_pool(settings)
    logger.info("Connection pool ready")
    yield
    app.state.pool.dispose()
    logger.info("Connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Users API",
        version="1.0.0",
        description="CRUD over the users table",
        lifespan=lifespan,
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run("users_api.main:app", host=settings.host, port=settings.port)
