import logging
from app.core.config import settings
from fastapi import Request
import redis.exceptions

logger = logging.getLogger(__name__)
RATE_LIMIT_VALUE_KEY = "config:RATE_LIMIT_LIMIT"
RATE_LIMIT_WINDOW_KEY = "config:RATE_LIMIT_WINDOW"
RATE_LIMITED_PREFIX = "/api/shortlink"

def get_rate_limit_config(store):
    limit, window = settings.RATE_LIMIT_LIMIT, settings.RATE_LIMIT_WINDOW
    try:
        limit_str = store.redis_client.get(RATE_LIMIT_VALUE_KEY)
        window_str = store.redis_client.get(RATE_LIMIT_WINDOW_KEY)
        limit = int(limit_str) if limit_str else limit
        window = int(window_str) if window_str else window
    except (redis.exceptions.RedisError, ValueError):
        logger.warning(
            f"Failed to fetch/parse dynamic rate limit config. "
            f"Using defaults: {limit} requests per {window} seconds."
        )
    return limit, window


def get_client_ip(request: Request) -> str:
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def is_rate_limited_path(path: str) -> bool:
    return path.startswith(RATE_LIMITED_PREFIX)


def check_rate_limit(store, key: str, limit: int, window: int):
    try:
        current = store.redis_client.get(key)
    except redis.exceptions.RedisError:
        logger.warning("Redis unavailable. Rate limiting skipped (fail open).")
        return None

    try:
        exceeded = bool(current) and int(current) >= limit
    except ValueError:
        logger.warning(f"Non-numeric rate limit counter {key}={current!r}. Rate limiting skipped (fail open).")
        return None

    if exceeded:
        return False

    try:
        pipe = store.redis_client.pipeline()
        pipe.incr(key, 1)
        if not current:
            pipe.expire(key, window)
        pipe.execute()
    except redis.exceptions.RedisError:
        logger.warning("Redis unavailable. Rate limit counter not updated (fail open).")
        return None
    return True
