import logging
from app.core.config import settings
from redis.connection import ConnectionPool
import redis

logger = logging.getLogger(__name__)

pool = ConnectionPool(
    host=settings.REDIS_HOST,
    port=settings.REDIS_PORT,
    decode_responses=True,
    max_connections=50,
    socket_connect_timeout=2,
    socket_keepalive=True,
    retry_on_timeout=True,
)

redis_client = redis.Redis(connection_pool=pool)

def verify_redis_connection():
    try:
        redis_client.ping()
        logger.info("Redis connection verified")
        return True
    except redis.exceptions.ConnectionError as e:
        logger.warning(f"Redis connection failed: {e}. Rate limiting and metrics are disabled until it recovers.")
        return False
    except Exception as e:
        logger.error(f"Unexpected Redis error: {e}")
        return False
