"""
IP별 요청 한도 (슬라이딩 윈도우).

config.REDIS_URL이 비어 있으면 프로세스 메모리에 기록하고(워커 1개 기준),
설정되어 있으면 여러 워커가 같은 Redis sorted set을 공유한다.
"""
import logging
import time
import uuid
from collections import defaultdict, deque
from typing import Deque, Dict, Optional, Protocol

import redis.asyncio as aioredis

from src import config

logger = logging.getLogger(__name__)

KEY_PREFIX = "festiplan:rate_limit:"


class RateLimitBackend(Protocol):
    async def is_rate_limited(self, key: str, limit: int, window: int) -> bool:
        """True면 이번 요청을 막는다 (window 초 안에 이미 limit건)."""
        ...


class InMemoryBackend:
    """키마다 최근 요청 시각을 deque로 보관한다. 오래된 시각은 요청 시 앞에서부터 버린다."""

    def __init__(self) -> None:
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)

    async def is_rate_limited(self, key: str, limit: int, window: int) -> bool:
        now = time.time()
        hits = self._hits[key]
        while hits and now - hits[0] >= window:
            hits.popleft()

        if len(hits) >= limit:
            return True
        hits.append(now)
        return False

    def forget(self, key: str) -> None:
        self._hits.pop(key, None)

    def __len__(self) -> int:
        return len(self._hits)


class RedisBackend:
    """
    요청마다 고유 member를 zadd하고, 한도를 넘었으면 그 member만 되돌린다.
    점수(시각) 범위로 지우지 않으므로 같은 순간의 다른 요청 기록은 남는다.
    """

    def __init__(self, redis_url: str) -> None:
        self._redis = aioredis.from_url(redis_url, decode_responses=True)
        logger.info("Rate limit backend: Redis (%s)", redis_url.rsplit("@", 1)[-1])

    async def is_rate_limited(self, key: str, limit: int, window: int) -> bool:
        now = time.time()
        redis_key = KEY_PREFIX + key
        member = f"{now}:{uuid.uuid4().hex}"

        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.zremrangebyscore(redis_key, 0, now - window)
            pipe.zadd(redis_key, {member: now})
            pipe.zcard(redis_key)
            pipe.expire(redis_key, window + 10)
            _, _, count, _ = await pipe.execute()

        if count > limit:
            await self._redis.zrem(redis_key, member)
            return True
        return False


def create_backend(redis_url: Optional[str] = None) -> RateLimitBackend:
    redis_url = redis_url or config.REDIS_URL
    if not redis_url:
        logger.info("Rate limit backend: in-memory")
        return InMemoryBackend()
    return RedisBackend(redis_url)
