import hashlib
import json
import time
from collections import OrderedDict
from typing import Any, Optional

from redis.asyncio import from_url as redis_from_url

from .config import Settings


def key_for(function: str, payload: Any) -> str:
    s = json.dumps([function, payload], sort_keys=True, separators=(",", ":"))
    return hashlib.sha1(s.encode()).hexdigest()


class _Entry:
    __slots__ = ("value", "exp")

    def __init__(self, value: Any, exp: Optional[float]):
        self.value = value
        self.exp = exp


class MemoryCache:
    backend = "memory"

    def __init__(self, ttl: int = 60, max_items: int = 512):
        self.ttl = ttl
        self.max_items = max_items
        self._store: "OrderedDict[str, _Entry]" = OrderedDict()

    def _now(self) -> float:
        return time.time()

    def _prune(self) -> None:
        now = self._now()
        expired = [k for k, e in self._store.items() if e.exp is not None and e.exp <= now]
        for k in expired:
            self._store.pop(k, None)
        while len(self._store) > self.max_items:
            self._store.popitem(last=False)

    async def start(self):
        return

    async def close(self):
        self._store.clear()

    async def get(self, key: str) -> Optional[Any]:
        e = self._store.get(key)
        if e is None:
            return None
        if e.exp is not None and e.exp <= self._now():
            self._store.pop(key, None)
            return None
        self._store.move_to_end(key)
        return e.value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None):
        # ttl=0 keeps the entry until it is evicted or close() runs
        ttl = self.ttl if ttl is None else ttl
        self._store[key] = _Entry(value, self._now() + ttl if ttl else None)
        self._store.move_to_end(key)
        self._prune()


class RedisCache:
    backend = "redis"

    def __init__(self, url: str, prefix: str = "svc-same:"):
        self._url = url
        self._prefix = prefix
        self._client = None

    async def start(self):
        self._client = redis_from_url(self._url, encoding="utf-8", decode_responses=True)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> Optional[Any]:
        if not self._client:
            return None
        raw = await self._client.get(self._prefix + key)
        return json.loads(raw) if raw else None

    async def set(self, key: str, value: Any, ttl: int = 60):
        if not self._client:
            return
        await self._client.set(
            self._prefix + key,
            json.dumps(value, separators=(",", ":"), ensure_ascii=False),
            ex=ttl or None,
        )


def get_cache(settings: Settings):
    if settings.enable_redis_cache:
        return RedisCache(settings.redis_url)
    return MemoryCache(ttl=settings.cache_api_ttl, max_items=settings.cache_max_items)
