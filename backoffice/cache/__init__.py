"""
Query cache and invalidation graph
"""

from .invalidation import (
    INVALIDATION_TABLE, InvalidationDispatcher, KeyFamily, Mutation, Scope, run_mutation
)
from .query_cache import (
    DEFAULT_ENTRY_TTL, DEFAULT_STALE_TIMES, CacheEntry, QueryCache, get_query_cache, principal_for
)
from .query_keys import (
    QueryKeys, StockQueryKeys, movement_keys, return_keys, role_keys, sale_keys, stock_keys,
    transfer_keys, user_keys
)
from .store import get_redis, init_redis

__all__ = [
    'INVALIDATION_TABLE', 'InvalidationDispatcher', 'KeyFamily', 'Mutation', 'Scope', 'run_mutation',
    'DEFAULT_ENTRY_TTL', 'DEFAULT_STALE_TIMES', 'CacheEntry', 'QueryCache', 'get_query_cache', 'principal_for',
    'QueryKeys', 'StockQueryKeys', 'movement_keys', 'return_keys', 'role_keys', 'sale_keys',
    'stock_keys', 'transfer_keys', 'user_keys',
    'get_redis', 'init_redis'
]
