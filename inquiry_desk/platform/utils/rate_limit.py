import math
from threading import Lock
from time import monotonic
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request

from inquiry_desk.platform.config import settings
from inquiry_desk.platform.exceptions import RateLimited
from inquiry_desk.platform.logger import get_logger

logger = get_logger("rate_limit")

RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."


def client_key(request: Request) -> str:
    """First X-Forwarded-For hop, else the socket peer, else "unknown"."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


class InMemoryRateLimiter:
    """
    Fixed-window counter keyed by caller.

    The window opens on a key's first request and lasts ``window_seconds``.
    State is process-local and is lost on restart.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = monotonic,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._records: Dict[str, Tuple[int, float]] = {}
        self._lock = Lock()

    async def hit(self, key: str) -> None:
        now = self._clock()
        with self._lock:
            count, reset_at = self._records.get(key, (0, 0.0))

            if count == 0 or now > reset_at:
                self._evict_expired(now)
                self._records[key] = (1, now + self.window_seconds)
                return

            if count >= self.limit:
                retry_after = max(1, math.ceil(reset_at - now))
                logger.warning(f"Rate limit exceeded for {key}")
                raise RateLimited(RATE_LIMIT_MESSAGE, retry_after=retry_after)

            self._records[key] = (count + 1, reset_at)

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (_, reset_at) in self._records.items() if now > reset_at]
        for k in expired:
            del self._records[k]

    def reset(self) -> None:
        with self._lock:
            self._records.clear()


class RedisRateLimiter:
    """Same fixed window, counted in Redis so every instance shares it."""

    def __init__(self, redis, limit: int, window_seconds: int, prefix: str = "rl"):
        self.redis = redis
        self.limit = limit
        self.window_seconds = window_seconds
        self.prefix = prefix

    async def hit(self, key: str) -> None:
        redis_key = f"{self.prefix}:{key}"
        count = await self.redis.incr(redis_key)

        if count == 1:
            await self.redis.expire(redis_key, self.window_seconds)

        if count > self.limit:
            ttl = await self.redis.ttl(redis_key)
            if ttl < 0:
                # Counter without an expiry would block this caller forever
                await self.redis.expire(redis_key, self.window_seconds)
                ttl = self.window_seconds
            logger.warning(f"Rate limit exceeded for {key}")
            raise RateLimited(RATE_LIMIT_MESSAGE, retry_after=max(1, int(ttl)))


_track_limiter: Optional[object] = None


def get_track_rate_limiter():
    """Limiter shared by every status lookup in this process."""
    global _track_limiter
    if _track_limiter is None:
        if settings.RATE_LIMIT_BACKEND == "redis":
            from inquiry_desk.platform.cache.redis import get_redis

            _track_limiter = RedisRateLimiter(
                get_redis(),
                limit=settings.TRACK_RATE_LIMIT,
                window_seconds=settings.TRACK_RATE_WINDOW_SECONDS,
                prefix="rl:track-order",
            )
        else:
            _track_limiter = InMemoryRateLimiter(
                limit=settings.TRACK_RATE_LIMIT,
                window_seconds=settings.TRACK_RATE_WINDOW_SECONDS,
            )
    return _track_limiter
