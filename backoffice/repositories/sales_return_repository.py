"""
Return Repository Implementation
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import sales_return as mapper
from backoffice.models import (
    CreateReturnDto, CreateReturnLineDto, PaginatedResult, ReturnFilters, SalesReturn, UpdateReturnDto
)
from .base import ReturnRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class ReturnApiRepository(ReturnRepositoryInterface):
    """Customer and supplier returns backed by the remote API"""

    base_path = '/returns'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[ReturnFilters] = None) -> PaginatedResult[SalesReturn]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[SalesReturn]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"Return not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))

    async def create(self, dto: CreateReturnDto) -> SalesReturn:
        body = await self.client.post(self.base_path, json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def update(self, id: str, dto: UpdateReturnDto) -> SalesReturn:
        # returns are updated with PUT, sales with PATCH
        body = await self.client.put(f"{self.base_path}/{id}", json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def confirm(self, id: str) -> SalesReturn:
        body = await self.client.post(f"{self.base_path}/{id}/confirm")
        return mapper.to_domain(unwrap_data(body))

    async def cancel(self, id: str) -> SalesReturn:
        body = await self.client.post(f"{self.base_path}/{id}/cancel")
        return mapper.to_domain(unwrap_data(body))

    async def add_line(self, id: str, line: CreateReturnLineDto) -> SalesReturn:
        body = await self.client.post(f"{self.base_path}/{id}/lines", json=line.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def remove_line(self, id: str, line_id: str) -> SalesReturn:
        body = await self.client.delete(f"{self.base_path}/{id}/lines/{line_id}")
        return mapper.to_domain(unwrap_data(body))
