"""
FastAPI application entry point.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.api import api_router
from app.core.config import settings
from app.core.database import create_db_and_tables
from app.core.logging_config import log_error, log_info, setup_logging


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging()
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    create_db_and_tables()
    log_info(f"{settings.app_name} {settings.app_version} started")
    yield


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log_error(exc, path=request.url.path, method=request.method)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @application.get("/")
    async def root():
        return {"message": f"{settings.app_name} API", "version": settings.app_version}

    application.include_router(api_router, prefix=settings.api_v1_prefix)
    return application


app = create_app()
