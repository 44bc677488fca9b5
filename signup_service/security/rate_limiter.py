"""Sliding window rate limiters guarding the signup endpoint."""

from __future__ import annotations

import logging
import math
import time
from collections import deque
from dataclasses import dataclass
from threading import Lock
from typing import Deque, DefaultDict, Final, Protocol

import redis
from redis import Redis
from redis.exceptions import ResponseError

from ..config import Settings

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RateLimitDecision:
    """Outcome of a rate limit check; ``retry_after`` is in whole seconds."""

    allowed: bool
    retry_after: int = 0


class RateLimiter(Protocol):
    def allow(self, key: str) -> RateLimitDecision:
        ...


def _retry_after(oldest: float, window: float, now: float) -> int:
    return max(1, math.ceil(oldest + window - now))


class SlidingWindowRateLimiter:
    """Thread-safe in-process sliding window rate limiter."""

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        """Initialise limiter parameters and per-key storage."""
        self._max_requests = max_requests
        self._window = window_seconds
        self._events: DefaultDict[str, Deque[float]] = DefaultDict(deque)
        self._lock = Lock()

    def allow(self, key: str) -> RateLimitDecision:
        """Record a request for ``key`` unless the window is already full."""
        now = time.time()
        with self._lock:
            queue = self._events[key]
            while queue and now - queue[0] > self._window:
                queue.popleft()
            if len(queue) >= self._max_requests:
                oldest = queue[0] if queue else now
                return RateLimitDecision(False, _retry_after(oldest, self._window, now))
            queue.append(now)
            return RateLimitDecision(True)


class RedisSlidingWindowRateLimiter:
    """Distributed sliding window limiter implemented with Redis sorted sets."""

    # Returns {1, 0} when admitted, {0, retry_after_ms} when limited.
    _LUA_SCRIPT: Final[str] = """
    local key = KEYS[1]
    local counter_key = key .. ':seq'
    local window_ms = tonumber(ARGV[1])
    local max_requests = tonumber(ARGV[2])
    local now_ms = tonumber(ARGV[3])

    redis.call('ZREMRANGEBYSCORE', key, 0, now_ms - window_ms)
    local current = redis.call('ZCARD', key)
    if current >= max_requests then
        local oldest = redis.call('ZRANGE', key, 0, 0, 'WITHSCORES')
        if oldest[2] then
            return {0, tonumber(oldest[2]) + window_ms - now_ms}
        end
        return {0, window_ms}
    end
    local seq = redis.call('INCR', counter_key)
    redis.call('PEXPIRE', counter_key, window_ms)
    local member = tostring(now_ms) .. ':' .. tostring(seq)
    redis.call('ZADD', key, now_ms, member)
    redis.call('PEXPIRE', key, window_ms)
    return {1, 0}
    """

    def __init__(
        self,
        client: Redis,
        *,
        max_requests: int,
        window_seconds: int,
        key_prefix: str = "rate",
    ) -> None:
        """Initialise the Redis client, window configuration, and Lua script cache."""
        self._client = client
        self._max_requests = max_requests
        self._window_ms = window_seconds * 1000
        self._key_prefix = key_prefix
        self._script = client.register_script(self._LUA_SCRIPT)

    def allow(self, key: str) -> RateLimitDecision:
        """Record a request for ``key`` against the shared window in Redis."""
        now_ms = int(time.time() * 1000)
        redis_key = f"{self._key_prefix}:{key}"
        try:
            allowed, retry_ms = self._script(
                keys=[redis_key], args=[self._window_ms, self._max_requests, now_ms]
            )
        except ResponseError as exc:
            message = str(exc).lower()
            if "unknown command" in message and "eval" in message:
                return self._allow_fallback(redis_key, now_ms)
            raise
        if int(allowed) == 1:
            return RateLimitDecision(True)
        return RateLimitDecision(False, max(1, math.ceil(int(retry_ms) / 1000)))

    def _allow_fallback(self, redis_key: str, now_ms: int) -> RateLimitDecision:
        """Pure-Python equivalent of the Lua script for servers without scripting."""
        self._client.zremrangebyscore(redis_key, 0, now_ms - self._window_ms)
        current = self._client.zcard(redis_key)
        if current >= self._max_requests:
            oldest = self._client.zrange(redis_key, 0, 0, withscores=True)
            oldest_ms = oldest[0][1] if oldest else now_ms
            return RateLimitDecision(
                False, _retry_after(oldest_ms / 1000, self._window_ms / 1000, now_ms / 1000)
            )
        seq = self._client.incr(f"{redis_key}:seq")
        self._client.pexpire(f"{redis_key}:seq", self._window_ms)
        member = f"{now_ms}:{seq}"
        self._client.zadd(redis_key, {member: now_ms})
        self._client.pexpire(redis_key, self._window_ms)
        return RateLimitDecision(True)


def build_rate_limiter(settings: Settings) -> RateLimiter:
    """Instantiate the configured rate limiter backend, preferring Redis when available."""
    if settings.rate_limit_backend == "redis" and settings.redis_url:
        try:
            client = redis.from_url(settings.redis_url)
            # ensure connectivity early to fail fast and fall back
            client.ping()
            logger.info("rate limiter configured for redis backend at %s", settings.redis_url)
            return RedisSlidingWindowRateLimiter(
                client,
                max_requests=settings.rate_limit_requests,
                window_seconds=settings.rate_limit_window_seconds,
            )
        except (redis.RedisError, ValueError) as exc:
            logger.warning("redis rate limiter unavailable, falling back to in-memory: %s", exc)

    logger.info("rate limiter using in-memory backend")
    return SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
