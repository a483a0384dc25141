"""
Stock Movement Repository Implementation
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import stock_movement as mapper
from backoffice.models import CreateMovementDto, MovementFilters, PaginatedResult, StockMovement
from .base import StockMovementRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class StockMovementApiRepository(StockMovementRepositoryInterface):
    """Stock movements backed by the remote inventory API"""

    base_path = '/inventory/movements'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[MovementFilters] = None) -> PaginatedResult[StockMovement]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[StockMovement]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"Stock movement not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))

    async def create(self, dto: CreateMovementDto) -> StockMovement:
        body = await self.client.post(self.base_path, json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def post(self, id: str) -> StockMovement:
        body = await self.client.post(f"{self.base_path}/{id}/post")
        return mapper.to_domain(unwrap_data(body))

    async def void(self, id: str) -> StockMovement:
        body = await self.client.post(f"{self.base_path}/{id}/void")
        return mapper.to_domain(unwrap_data(body))
