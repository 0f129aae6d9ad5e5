from app.db.Connection import redis_store
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import signal, sys
from contextlib import asynccontextmanager

from app.core.config import settings
from app.api import shortener
from app.routers import health
from app.core.logging_config import configure_logging
from app.services.shortener import InvalidShortLinkRequest
from app.schemas import ErrorResponse
from app.utils.encoding import current_millis
from app.RateLimitHelper import get_rate_limit_config, get_client_ip, is_rate_limited_path, check_rate_limit

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    redis_store.verify_redis_connection()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Generates fixed-length base62 short codes for long URLs",
    lifespan=lifespan,
)

app.include_router(shortener.router)
app.include_router(health.router)


@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    if not is_rate_limited_path(request.url.path):
        return await call_next(request)

    limit, window = get_rate_limit_config(redis_store)
    client_ip = get_client_ip(request)
    key = f"rate_limit:{client_ip}"

    allowed = check_rate_limit(redis_store, key, limit, window)
    if allowed is False:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            headers={"Retry-After": str(window)},
            content={"detail": f"Too many requests. Limit is {limit} per {window} seconds."}
        )

    return await call_next(request)

@app.exception_handler(InvalidShortLinkRequest)
async def invalid_request_handler(request: Request, exc: InvalidShortLinkRequest):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    body = ErrorResponse(message=str(exc), timestamp=current_millis())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

def _shutdown(signum, frame):
    logger.info("Shutting down gracefully...")
    try:
        redis_store.redis_client.close()
    except Exception:
        logger.debug("Error closing Redis client")
    sys.exit(0)

signal.signal(signal.SIGTERM, _shutdown)
signal.signal(signal.SIGINT, _shutdown)
