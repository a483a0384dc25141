"""
Role Repository Implementation (read-only)
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import role as mapper
from backoffice.models import PaginatedResult, Role
from .base import RoleRepositoryInterface
from .helpers import is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class RoleApiRepository(RoleRepositoryInterface):
    """Roles and their permissions; the server returns the whole list unpaginated"""

    base_path = '/roles'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self) -> PaginatedResult[Role]:
        return map_paginated(await self.client.get(self.base_path), mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[Role]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"Role not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))
