"""
Sale Repository Implementation
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import sale as mapper
from backoffice.models import (
    CreateSaleDto, CreateSaleLineDto, PaginatedResult, Sale, SaleFilters, UpdateSaleDto
)
from .base import SaleRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class SaleApiRepository(SaleRepositoryInterface):
    """Sales backed by the remote API"""

    base_path = '/sales'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[SaleFilters] = None) -> PaginatedResult[Sale]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[Sale]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"Sale not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))

    async def create(self, dto: CreateSaleDto) -> Sale:
        body = await self.client.post(self.base_path, json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def update(self, id: str, dto: UpdateSaleDto) -> Sale:
        body = await self.client.patch(f"{self.base_path}/{id}", json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def confirm(self, id: str) -> Sale:
        body = await self.client.post(f"{self.base_path}/{id}/confirm")
        return mapper.to_domain(unwrap_data(body))

    async def cancel(self, id: str) -> Sale:
        body = await self.client.post(f"{self.base_path}/{id}/cancel")
        return mapper.to_domain(unwrap_data(body))

    async def add_line(self, id: str, line: CreateSaleLineDto) -> Sale:
        # the server answers with the whole sale, not the new line
        body = await self.client.post(f"{self.base_path}/{id}/lines", json=line.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def remove_line(self, id: str, line_id: str) -> Sale:
        body = await self.client.delete(f"{self.base_path}/{id}/lines/{line_id}")
        return mapper.to_domain(unwrap_data(body))
