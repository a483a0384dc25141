"""
Query Cache - Redis-backed store of query results with staleness tracking

Query keys are tuples whose first element is the entity kind, e.g.
("movements", "detail", "m-1"). Each cached result is a Redis hash holding
the pickled value, the fetch time and an invalidated flag. Invalidation never
drops a value; it only flags the entry so the next read goes back to the
server.

Entries are partitioned per tenant and, inside a tenant, per principal (the
credentials the request carried), so a cached document is only served to a
caller presenting the same credentials. Invalidation is tenant-wide: a
mutation made by one user makes the entry stale for every user of the
organization, in every worker process sharing the Redis instance.
"""

import hashlib
import json
import logging
import pickle
import time
from collections import deque
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Awaitable, Callable, Deque, Dict, Hashable, List, Optional, Tuple
from urllib.parse import quote

import redis

logger = logging.getLogger(__name__)

QueryKey = Tuple[Hashable, ...]

DEFAULT_STALE_TIMES = {
    'stock': 120,
    'movements': 120,
    'transfers': 120,
    'sales': 120,
    'returns': 120,
    'products': 300,
    'warehouses': 300,
    'categories': 300,
    'roles': 300,
    'users': 300,
}

# Redis expiry of entries and generation counters; bounds memory use
DEFAULT_ENTRY_TTL = 3600

NAMESPACE = 'backoffice:query'
PRINCIPAL_LENGTH = 32


def _digest(value: str, length: int) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:length]


def principal_for(credentials: Optional[str]) -> str:
    """Opaque partition id for the credentials a request carried"""
    return _digest(credentials or '', PRINCIPAL_LENGTH)


def encode_part(part: Any) -> str:
    """Render one key element as a Redis key segment free of ':' and glob characters"""
    if isinstance(part, str):
        return quote(part, safe='')
    if part is None:
        return '_'
    if is_dataclass(part):
        content = json.dumps(asdict(part), sort_keys=True, default=str)
        return hashlib.md5(content.encode()).hexdigest()
    return quote(repr(part), safe='')


@dataclass
class CacheEntry:
    value: Any
    fetched_at: float
    invalidated: bool = False


class QueryCache:
    """
    Cache of query results for one tenant and principal.

    With no Redis client, caching is disabled: every fetch goes to the server
    and invalidation is a no-op.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis],
        tenant: str = 'default',
        principal: Optional[str] = None,
        stale_times: Optional[Dict[str, float]] = None,
        clock: Callable[[], float] = time.time,
        ttl: int = DEFAULT_ENTRY_TTL,
        log_size: int = 500
    ):
        self.redis = redis_client
        self.tenant = _digest(tenant, 16)
        self.principal = principal or principal_for(None)
        self.stale_times = dict(DEFAULT_STALE_TIMES)
        self.stale_times.update(stale_times or {})
        self.clock = clock
        self.ttl = ttl
        # prefixes invalidated through this instance, most recent last
        self.invalidation_log: Deque[QueryKey] = deque(maxlen=log_size)

    def __len__(self):
        return len(self.keys())

    def __contains__(self, key: QueryKey) -> bool:
        if self.redis is None:
            return False
        return self.redis.exists(self._entry_name(key)) > 0

    # Redis key layout

    def _segments(self, key: QueryKey) -> str:
        return ':'.join(encode_part(part) for part in key)

    def _entry_name(self, key: QueryKey) -> str:
        return f"{NAMESPACE}:{self.tenant}:{self.principal}:e:{self._segments(key)}"

    def _generation_name(self, prefix: QueryKey) -> str:
        return f"{NAMESPACE}:{self.tenant}:g:{self._segments(prefix)}"

    def _generation_names(self, key: QueryKey) -> List[str]:
        """Counters of every prefix of `key`, the key itself included"""
        return [self._generation_name(key[:length]) for length in range(1, len(key) + 1)]

    def _read(self, key: QueryKey) -> Optional[CacheEntry]:
        data = self.redis.hgetall(self._entry_name(key))
        if b'value' not in data:
            return None
        return CacheEntry(
            value=pickle.loads(data[b'value']),
            fetched_at=float(data[b'fetched_at'].decode()),
            invalidated=data.get(b'invalidated') == b'1'
        )

    def _write(self, target, key: QueryKey, value: Any, invalidated: bool) -> None:
        name = self._entry_name(key)
        target.hset(name, mapping={
            'key': pickle.dumps(key),
            'value': pickle.dumps(value),
            'fetched_at': repr(self.clock()),
            'invalidated': '1' if invalidated else '0',
        })
        target.expire(name, self.ttl)

    def _store(self, key: QueryKey, value: Any, generations: Optional[List[Any]] = None) -> None:
        """
        Write `value` for `key`.

        `generations` is the snapshot of the key's prefix counters taken
        before the value was fetched; if any counter moved since, an
        invalidation overlapped the read and the value is stored already stale.
        """
        generation_names = self._generation_names(key)
        try:
            with self.redis.pipeline() as pipe:
                try:
                    pipe.watch(*generation_names)
                    invalidated = generations is not None and pipe.mget(generation_names) != generations
                    pipe.multi()
                    self._write(pipe, key, value, invalidated)
                    pipe.execute()
                except redis.WatchError:
                    # a counter moved between the check and the write
                    self._write(self.redis, key, value, True)
        except redis.RedisError as e:
            logger.warning(f"Error writing cache entry {key}: {e}")

    # Public API

    def stale_time_for(self, key: QueryKey) -> float:
        return self.stale_times.get(key[0], 0)

    def _entry_is_stale(self, key: QueryKey, entry: Optional[CacheEntry], stale_time: Optional[float]) -> bool:
        if entry is None or entry.invalidated:
            return True
        if stale_time is None:
            stale_time = self.stale_time_for(key)
        return self.clock() - entry.fetched_at >= stale_time

    def is_stale(self, key: QueryKey, stale_time: Optional[float] = None) -> bool:
        if self.redis is None:
            return True
        return self._entry_is_stale(key, self._read(key), stale_time)

    def peek(self, key: QueryKey) -> Any:
        """Cached value regardless of staleness, None when never fetched"""
        if self.redis is None:
            return None
        entry = self._read(key)
        return entry.value if entry else None

    def set(self, key: QueryKey, value: Any) -> None:
        if self.redis is not None:
            self._store(key, value)

    async def fetch(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
        stale_time: Optional[float] = None
    ) -> Any:
        """
        Return the cached value for `key` while fresh, otherwise refetch.

        Errors raised by `fetcher` propagate and leave the cache unchanged.
        Redis failures degrade to an uncached read.
        """
        if self.redis is None:
            return await fetcher()

        try:
            entry = self._read(key)
            if not self._entry_is_stale(key, entry, stale_time):
                logger.debug(f"Cache hit: {key}")
                return entry.value
            generations = self.redis.mget(self._generation_names(key))
        except redis.RedisError as e:
            logger.warning(f"Error reading cache entry {key}: {e}")
            return await fetcher()

        logger.debug(f"Cache miss: {key}")
        value = await fetcher()
        self._store(key, value, generations)
        return value

    def invalidate(self, prefix: QueryKey) -> int:
        """
        Mark stale every entry under `prefix`, for all principals of the tenant.

        Returns how many entries were flagged.
        """
        self.invalidation_log.append(prefix)
        if self.redis is None:
            return 0

        segments = self._segments(prefix)
        pattern = f"{NAMESPACE}:{self.tenant}:{'?' * PRINCIPAL_LENGTH}:e:{segments}"
        count = 0
        try:
            generation = self._generation_name(prefix)
            with self.redis.pipeline() as pipe:
                pipe.incr(generation)
                pipe.expire(generation, self.ttl)
                pipe.execute()

            for match in (pattern, f"{pattern}:*"):
                for name in self.redis.scan_iter(match=match):
                    if self.redis.hset(name, 'invalidated', '1'):
                        # the entry expired before it was flagged
                        self.redis.delete(name)
                    else:
                        count += 1
        except redis.RedisError as e:
            logger.warning(f"Error invalidating cache prefix {prefix}: {e}")

        logger.debug(f"Invalidated {count} entries under {prefix}")
        return count

    def keys(self) -> List[QueryKey]:
        """Query keys cached for this principal"""
        if self.redis is None:
            return []
        keys = []
        for name in self.redis.scan_iter(match=f"{NAMESPACE}:{self.tenant}:{self.principal}:e:*"):
            raw = self.redis.hget(name, 'key')
            if raw is not None:
                keys.append(pickle.loads(raw))
        return keys

    def clear(self) -> None:
        """Drop every entry and counter of the tenant"""
        self.invalidation_log.clear()
        if self.redis is None:
            return
        names = list(self.redis.scan_iter(match=f"{NAMESPACE}:{self.tenant}:*"))
        if names:
            self.redis.delete(*names)


def get_query_cache(
    redis_client: Optional[redis.Redis],
    tenant: str,
    credentials: Optional[str] = None,
    stale_times: Optional[Dict[str, float]] = None,
    ttl: int = DEFAULT_ENTRY_TTL
) -> QueryCache:
    """Cache view of one tenant for the caller presenting `credentials`"""
    return QueryCache(
        redis_client,
        tenant=tenant,
        principal=principal_for(credentials),
        stale_times=stale_times,
        ttl=ttl
    )
