"""
Query key factories, one per entity kind
"""

from typing import Any, Hashable, Tuple


class QueryKeys:
    """Hierarchical keys: all > lists/details > list(filters)/detail(id)"""

    def __init__(self, kind: str):
        self.kind = kind

    @property
    def all(self) -> Tuple[str]:
        return (self.kind,)

    def lists(self) -> Tuple[str, str]:
        return (self.kind, 'list')

    def list(self, filters: Any = None) -> Tuple[Hashable, ...]:
        return (self.kind, 'list', filters)

    def details(self) -> Tuple[str, str]:
        return (self.kind, 'detail')

    def detail(self, id: str) -> Tuple[str, str, str]:
        return (self.kind, 'detail', id)


class StockQueryKeys(QueryKeys):
    """Stock keys also address a single (product, warehouse) location"""

    def by_location(self) -> Tuple[str, str]:
        return (self.kind, 'location')

    def location(self, product_id: str, warehouse_id: str) -> Tuple[str, str, str, str]:
        return (self.kind, 'location', product_id, warehouse_id)


movement_keys = QueryKeys('movements')
transfer_keys = QueryKeys('transfers')
sale_keys = QueryKeys('sales')
return_keys = QueryKeys('returns')
stock_keys = StockQueryKeys('stock')
user_keys = QueryKeys('users')
role_keys = QueryKeys('roles')
