# src/tech_news/main.py
"""Main entry point for the Tech News application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from tech_news.api import (
    comments_router,
    pages_router,
    posts_router,
    users_router,
    votes_router,
)
from tech_news.core.errors import TechNewsError
from tech_news.core.settings import settings
from tech_news.db.session import AsyncSessionLocal, engine, sync_schema
from tech_news.services.session_service import prune_expired_sessions
from tech_news.templating import STATIC_DIR

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Link-sharing news site with comments and upvotes",
    version=settings.app_version,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=["*"],
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(users_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(comments_router, prefix="/api")
app.include_router(votes_router, prefix="/api")
app.include_router(pages_router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.exception_handler(TechNewsError)
async def handle_domain_error(request: Request, exc: TechNewsError) -> JSONResponse:
    """Answer service errors with their status code and message."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the offending fields."""
    logger.info("Rejected %s %s: invalid request data", request.method, request.url.path)
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": jsonable_encoder(errors)},
    )


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log store failures and hide their detail from the client."""
    logger.exception("Database error during %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.on_event("startup")
async def on_startup() -> None:
    if settings.db_sync_on_startup:
        await sync_schema()
    async with AsyncSessionLocal() as db:
        removed = await prune_expired_sessions(db)
    if removed:
        logger.info("Removed %d expired sessions", removed)
    logger.info("%s %s ready on port %d", settings.app_name, settings.app_version, settings.port)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await engine.dispose()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("tech_news.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
