"""
Login throttling: fixed windows counted in process memory, shared via Redis.

Each API worker keeps its own counters and pushes them to Redis every few
seconds, so a key's count is seeded from Redis the first time a worker sees
it. Without Redis the limiter fails closed.
"""

import logging
import os
import time
from threading import Lock
from typing import Optional

import redis
from fastapi import HTTPException, Request, status

from .config import LOGIN_RATE_LIMIT_ENABLED

logger = logging.getLogger(__name__)

redis_client: Optional[redis.Redis] = None

# {key: {"count": int, "reset_time": int, "last_redis_sync": int}}
memory_cache: dict[str, dict] = {}
cache_lock = Lock()

REDIS_SYNC_INTERVAL = 10
CACHE_SWEEP_INTERVAL = 60
_last_sweep = 0

_CONNECTION_OPTIONS = {
    "decode_responses": True,
    "socket_connect_timeout": 5,
    "socket_timeout": 5,
    "retry_on_timeout": True,
    "health_check_interval": 30,
}


def _mask_url(url: str) -> str:
    if "@" not in url:
        return "****"
    scheme = url.split(":", 1)[0]
    return f"{scheme}:****@{url.rsplit('@', 1)[1]}"


def get_redis_client() -> redis.Redis:
    """Connect once (REDIS_URL, else REDIS_HOST/PORT/PASSWORD/DB/SSL) and reuse"""
    global redis_client
    if redis_client is not None:
        return redis_client

    redis_url = os.getenv("REDIS_URL")
    if redis_url:
        target = _mask_url(redis_url)
        client = redis.from_url(redis_url, **_CONNECTION_OPTIONS)
    else:
        host = os.getenv("REDIS_HOST", "localhost")
        port = int(os.getenv("REDIS_PORT", "6379"))
        target = f"{host}:{port}"
        client = redis.Redis(
            host=host,
            port=port,
            password=os.getenv("REDIS_PASSWORD"),
            db=int(os.getenv("REDIS_DB", "0")),
            ssl=os.getenv("REDIS_SSL", "false").lower() == "true",
            **_CONNECTION_OPTIONS,
        )

    try:
        client.ping()
    except Exception as e:
        logger.error(f"❌ Redis unreachable at {target}: {e}")
        raise

    logger.info(f"📡 Rate limiter connected to Redis at {target}")
    redis_client = client
    return redis_client


def sweep_expired_windows(now: Optional[int] = None):
    """Drop finished windows, at most once per CACHE_SWEEP_INTERVAL"""
    global _last_sweep
    now = int(time.time()) if now is None else now
    if now - _last_sweep < CACHE_SWEEP_INTERVAL:
        return

    with cache_lock:
        expired = [key for key, entry in memory_cache.items() if now >= entry["reset_time"]]
        for key in expired:
            del memory_cache[key]

    if expired:
        logger.debug(f"🧹 Dropped {len(expired)} expired rate limit windows")
    _last_sweep = now


def _open_window(key: str, window_seconds: int, store: redis.Redis, now: int) -> dict:
    """Start tracking `key`, continuing a window another worker already opened"""
    try:
        count = store.get(key)
        ttl = store.ttl(key)
    except Exception as e:
        logger.warning(f"⚠️ Could not read {key} from Redis, counting locally: {e}")
        count, ttl = None, 0

    if count and ttl > 0:
        return {"count": int(count), "reset_time": now + ttl, "last_redis_sync": now}
    return {"count": 0, "reset_time": now + window_seconds, "last_redis_sync": now}


def check_rate_limit(
    key: str, limit: int, window_seconds: int, redis_client: redis.Redis
) -> tuple[bool, int, int]:
    """
    Count one attempt against `key`.

    Returns:
        (allowed, attempts counted in the window, seconds until the window resets)
    """
    try:
        now = int(time.time())
        sweep_expired_windows(now)

        with cache_lock:
            entry = memory_cache.get(key)
            if entry is None:
                entry = memory_cache[key] = _open_window(key, window_seconds, redis_client, now)
            elif now >= entry["reset_time"]:
                entry.update(count=0, reset_time=now + window_seconds, last_redis_sync=0)

            allowed = entry["count"] < limit
            if allowed:
                entry["count"] += 1

            if now - entry["last_redis_sync"] >= REDIS_SYNC_INTERVAL:
                try:
                    redis_client.set(key, entry["count"], ex=max(1, entry["reset_time"] - now))
                    entry["last_redis_sync"] = now
                except Exception as e:
                    logger.warning(f"⚠️ Could not push {key} to Redis: {e}")

            return allowed, entry["count"], max(0, entry["reset_time"] - now)

    except Exception as e:
        logger.error(f"❌ Rate limit check failed, refusing request: {e}")
        return False, limit, 0


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def rate_limit_dependency(
    request: Request,
    limit: int,
    window_seconds: int,
    key_prefix: str = "rate_limit",
):
    """
    FastAPI dependency enforcing a per-IP window.

    Raises 429 once the window is used up and 503 when Redis cannot be reached.
    """
    if not LOGIN_RATE_LIMIT_ENABLED:
        return

    key = f"{key_prefix}:{get_client_ip(request)}"
    try:
        store = get_redis_client()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Rate limiting service temporarily unavailable",
        ) from e

    allowed, count, retry_after = check_rate_limit(key, limit, window_seconds, store)
    if not allowed:
        logger.warning(f"🚫 {key} hit the limit ({count}/{limit} in {window_seconds}s)")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={
                "message": f"Too many attempts. Try again in {retry_after} seconds.",
                "retry_after": retry_after,
            },
            headers={"Retry-After": str(retry_after)},
        )

    request.state.rate_limit_remaining = limit - count


def create_rate_limiter(limit: int, window_seconds: int, key_prefix: str = "rate_limit"):
    """Bind limit/window/prefix into a dependency, e.g. Depends(create_rate_limiter(10, 300, "login"))"""

    async def rate_limiter(request: Request):
        return await rate_limit_dependency(request, limit, window_seconds, key_prefix)

    return rate_limiter
