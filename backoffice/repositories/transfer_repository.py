"""
Transfer Repository Implementation
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import transfer as mapper
from backoffice.models import CreateTransferDto, PaginatedResult, Transfer, TransferFilters, TransferStatus
from .base import TransferRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class TransferApiRepository(TransferRepositoryInterface):
    """Warehouse transfers backed by the remote inventory API"""

    base_path = '/inventory/transfers'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[TransferFilters] = None) -> PaginatedResult[Transfer]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[Transfer]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"Transfer not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))

    async def create(self, dto: CreateTransferDto) -> Transfer:
        body = await self.client.post(self.base_path, json=dto.to_payload())
        return mapper.to_domain(unwrap_data(body))

    async def update_status(self, id: str, status: TransferStatus) -> Transfer:
        body = await self.client.patch(f"{self.base_path}/{id}/status", json={'status': status.value})
        return mapper.to_domain(unwrap_data(body))
