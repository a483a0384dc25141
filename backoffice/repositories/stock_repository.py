"""
Stock Repository Implementation (read-only)
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import stock as mapper
from backoffice.models import PaginatedResult, Stock, StockFilters
from .base import StockRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class StockApiRepository(StockRepositoryInterface):
    """Stock levels computed by the remote inventory API"""

    base_path = '/inventory/stock'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[StockFilters] = None) -> PaginatedResult[Stock]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_product_and_warehouse(self, product_id: str, warehouse_id: str) -> Optional[Stock]:
        try:
            body = await self.client.get(f"{self.base_path}/product/{product_id}/warehouse/{warehouse_id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"No stock for product {product_id} in warehouse {warehouse_id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))
