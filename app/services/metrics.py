from app.db.Connection import redis_store
import logging
import redis.exceptions

logger = logging.getLogger(__name__)

GENERATED_COUNTER_KEY = "metrics:generated"


def record_generated(count: int = 1):
        try:
                total = redis_store.redis_client.incrby(GENERATED_COUNTER_KEY, count)
                logger.debug("metrics.record_generated: counter now %s", total)
        except redis.exceptions.RedisError:
                logger.warning("metrics.record_generated: Redis unavailable, dropped %d", count)

def get_total_generated() -> int:
        try:
                value = redis_store.redis_client.get(GENERATED_COUNTER_KEY)
        except redis.exceptions.RedisError:
                logger.warning("metrics.get_total_generated: Redis unavailable, reporting 0")
                return 0
        try:
                return int(value) if value else 0
        except ValueError:
                logger.warning("metrics.get_total_generated: non-numeric counter %r", value)
                return 0

def update_stat(background_tasks, count: int = 1):
    background_tasks.add_task(record_generated, count)
