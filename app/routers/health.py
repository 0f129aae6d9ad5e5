from fastapi import APIRouter
from app.db.Connection import redis_store

router = APIRouter(tags=["health"])

# simple liveness
@router.get("/health")
def health():
    return {"status": "healthy", "service": "short-link-generator"}

# readiness: the generator itself has no dependencies, Redis only backs
# rate limiting and metrics, so report it without failing readiness
@router.get("/ready")
def readiness():
    details = {"generator": "ok", "redis": "unknown"}
    try:
        redis_store.redis_client.ping()
        details["redis"] = "ok"
    except Exception as e:
        details["redis"] = f"error: {str(e)}"

    return {"ready": True, "details": details}
