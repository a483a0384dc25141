"""
Stock Service - cached reads of the server-computed stock levels
"""

from typing import Optional

from backoffice.cache import QueryCache, stock_keys
from backoffice.models import PaginatedResult, Stock, StockFilters
from backoffice.repositories import StockRepositoryInterface


class StockService:
    """Read-only; stock changes only through movement and transfer mutations"""

    def __init__(self, repository: StockRepositoryInterface, cache: QueryCache):
        self.repository = repository
        self.cache = cache

    async def list(self, filters: Optional[StockFilters] = None) -> PaginatedResult[Stock]:
        filters = filters or StockFilters()
        return await self.cache.fetch(stock_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get_location(self, product_id: str, warehouse_id: str) -> Optional[Stock]:
        return await self.cache.fetch(
            stock_keys.location(product_id, warehouse_id),
            lambda: self.repository.find_by_product_and_warehouse(product_id, warehouse_id)
        )
