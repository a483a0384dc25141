"""
Invalidation graph - which cached queries each mutation makes stale

The mapping lives in INVALIDATION_TABLE as plain data so it can be audited
and tested on its own. InvalidationDispatcher is the only reader.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

from .query_cache import QueryCache, QueryKey
from .query_keys import (
    QueryKeys, movement_keys, return_keys, role_keys, sale_keys, stock_keys, transfer_keys, user_keys
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Mutation(Enum):
    MOVEMENT_CREATED = 'MOVEMENT_CREATED'
    MOVEMENT_POSTED = 'MOVEMENT_POSTED'
    MOVEMENT_VOIDED = 'MOVEMENT_VOIDED'
    TRANSFER_CREATED = 'TRANSFER_CREATED'
    TRANSFER_DISPATCHED = 'TRANSFER_DISPATCHED'
    TRANSFER_COMPLETED = 'TRANSFER_COMPLETED'
    TRANSFER_CANCELLED = 'TRANSFER_CANCELLED'
    SALE_CREATED = 'SALE_CREATED'
    SALE_UPDATED = 'SALE_UPDATED'
    SALE_CONFIRMED = 'SALE_CONFIRMED'
    SALE_CANCELLED = 'SALE_CANCELLED'
    SALE_LINE_ADDED = 'SALE_LINE_ADDED'
    SALE_LINE_REMOVED = 'SALE_LINE_REMOVED'
    RETURN_CREATED = 'RETURN_CREATED'
    RETURN_UPDATED = 'RETURN_UPDATED'
    RETURN_CONFIRMED = 'RETURN_CONFIRMED'
    RETURN_CANCELLED = 'RETURN_CANCELLED'
    RETURN_LINE_ADDED = 'RETURN_LINE_ADDED'
    RETURN_LINE_REMOVED = 'RETURN_LINE_REMOVED'
    USER_ROLE_ASSIGNED = 'USER_ROLE_ASSIGNED'
    USER_ROLE_REMOVED = 'USER_ROLE_REMOVED'


class Scope(Enum):
    LISTS = 'LISTS'            # every list query of the kind
    DETAIL = 'DETAIL'          # the detail query of the mutated document
    DETAILS = 'DETAILS'        # every detail query of the kind
    LOCATIONS = 'LOCATIONS'    # stock of each (product, warehouse) the document touches
    ALL = 'ALL'


@dataclass(frozen=True)
class KeyFamily:
    kind: str
    scope: Scope


KEY_FACTORIES: Dict[str, QueryKeys] = {
    keys.kind: keys
    for keys in (movement_keys, transfer_keys, sale_keys, return_keys, stock_keys, user_keys, role_keys)
}


def _own(kind: str, *scopes: Scope) -> Tuple[KeyFamily, ...]:
    return tuple(KeyFamily(kind, scope) for scope in scopes)


_STOCK = _own('stock', Scope.LISTS, Scope.LOCATIONS)

INVALIDATION_TABLE: Dict[Mutation, Tuple[KeyFamily, ...]] = {
    Mutation.MOVEMENT_CREATED: _own('movements', Scope.LISTS),
    Mutation.MOVEMENT_POSTED: _own('movements', Scope.LISTS, Scope.DETAIL) + _STOCK,
    Mutation.MOVEMENT_VOIDED: _own('movements', Scope.LISTS, Scope.DETAIL) + _STOCK,

    Mutation.TRANSFER_CREATED: _own('transfers', Scope.LISTS) + _STOCK,
    Mutation.TRANSFER_DISPATCHED: _own('transfers', Scope.LISTS, Scope.DETAIL),
    Mutation.TRANSFER_COMPLETED: _own('transfers', Scope.LISTS, Scope.DETAIL) + _STOCK,
    Mutation.TRANSFER_CANCELLED: _own('transfers', Scope.LISTS, Scope.DETAIL),

    Mutation.SALE_CREATED: _own('sales', Scope.LISTS),
    Mutation.SALE_UPDATED: _own('sales', Scope.LISTS, Scope.DETAIL),
    Mutation.SALE_CONFIRMED: _own('sales', Scope.LISTS, Scope.DETAIL),
    Mutation.SALE_CANCELLED: _own('sales', Scope.LISTS, Scope.DETAIL),
    Mutation.SALE_LINE_ADDED: _own('sales', Scope.LISTS, Scope.DETAIL),
    Mutation.SALE_LINE_REMOVED: _own('sales', Scope.LISTS, Scope.DETAIL),

    Mutation.RETURN_CREATED: _own('returns', Scope.LISTS),
    Mutation.RETURN_UPDATED: _own('returns', Scope.LISTS, Scope.DETAIL),
    Mutation.RETURN_CONFIRMED: _own('returns', Scope.LISTS, Scope.DETAIL),
    Mutation.RETURN_CANCELLED: _own('returns', Scope.LISTS, Scope.DETAIL),
    Mutation.RETURN_LINE_ADDED: _own('returns', Scope.LISTS, Scope.DETAIL),
    Mutation.RETURN_LINE_REMOVED: _own('returns', Scope.LISTS, Scope.DETAIL),

    Mutation.USER_ROLE_ASSIGNED: _own('users', Scope.LISTS, Scope.DETAIL) + _own('roles', Scope.LISTS, Scope.DETAILS),
    Mutation.USER_ROLE_REMOVED: _own('users', Scope.LISTS, Scope.DETAIL) + _own('roles', Scope.LISTS, Scope.DETAILS),
}


class InvalidationDispatcher:
    """Applies INVALIDATION_TABLE entries to one QueryCache"""

    def __init__(self, cache: QueryCache, table: Optional[Dict[Mutation, Tuple[KeyFamily, ...]]] = None):
        self.cache = cache
        self.table = table if table is not None else INVALIDATION_TABLE

    def prefixes_for(self, mutation: Mutation, document_id: Optional[str] = None,
                     document: Any = None) -> List[QueryKey]:
        """Resolve the key prefixes a mutation makes stale"""
        if document_id is None:
            document_id = getattr(document, 'id', None)

        prefixes = []
        for family in self.table[mutation]:
            keys = KEY_FACTORIES[family.kind]
            if family.scope == Scope.ALL:
                prefixes.append(keys.all)
            elif family.scope == Scope.LISTS:
                prefixes.append(keys.lists())
            elif family.scope == Scope.DETAILS:
                prefixes.append(keys.details())
            elif family.scope == Scope.DETAIL:
                if document_id is not None:
                    prefixes.append(keys.detail(document_id))
            elif family.scope == Scope.LOCATIONS:
                for product_id, warehouse_id in sorted(getattr(document, 'stock_locations', ())):
                    prefixes.append(stock_keys.location(product_id, warehouse_id))
        return prefixes

    def dispatch(self, mutation: Mutation, document_id: Optional[str] = None,
                 document: Any = None) -> List[QueryKey]:
        prefixes = self.prefixes_for(mutation, document_id, document)
        for prefix in prefixes:
            self.cache.invalidate(prefix)
        logger.debug(f"{mutation.value} invalidated {len(prefixes)} key prefixes")
        return prefixes


async def run_mutation(
    dispatcher: InvalidationDispatcher,
    mutation: Mutation,
    call: Callable[[], Awaitable[T]],
    document_id: Optional[str] = None
) -> T:
    """
    Await a mutation and invalidate its declared keys once it succeeded.

    If `call` raises, nothing is invalidated and the error propagates.
    """
    result = await call()
    dispatcher.dispatch(mutation, document_id=document_id, document=result)
    return result
