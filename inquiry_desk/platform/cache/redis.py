from typing import Optional

from redis.asyncio import Redis

from inquiry_desk.platform.config import settings

_redis: Optional[Redis] = None


def get_redis() -> Redis:
    """Lazily create the shared Redis client from REDIS_URL."""
    global _redis
    if _redis is None:
        if not settings.REDIS_URL:
            raise RuntimeError("REDIS_URL must be set when RATE_LIMIT_BACKEND=redis")
        _redis = Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
    return _redis
