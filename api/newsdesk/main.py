"""Newsdesk API."""

from contextlib import asynccontextmanager

import redis
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from newsdesk.api.middleware.logging import LoggingMiddleware
from newsdesk.api.v1.endpoints import health
from newsdesk.api.v1.router import api_router
from newsdesk.config.settings import settings
from newsdesk.core.logging import get_logger, setup_logging
from newsdesk.db.redis import close_redis_connection, get_redis_client
from newsdesk.pagination import InvalidArgumentError

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version}",
        extra={"environment": settings.environment},
    )

    try:
        news_count = get_redis_client().zcard("news:all")
        logger.info(f"Initialized: {news_count} news")
    except redis.RedisError as e:
        logger.error(f"Redis initialization failed: {e}")
        if settings.environment == "production":
            raise

    yield

    logger.info("Shutting down")
    close_redis_connection()


app = FastAPI(
    title=f"{settings.app_name} API",
    version=settings.app_version,
    description="Paginated news listing",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

if settings.allowed_origin_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(
    request: Request, exc: InvalidArgumentError
) -> JSONResponse:
    logger.warning(f"Rejected {request.url.path}: {exc} (code {exc.code})")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


# Register routes
app.include_router(health.router, tags=["health"])
app.include_router(api_router, prefix=settings.api_prefix)

if __name__ == "__main__":
    uvicorn.run(
        "newsdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
