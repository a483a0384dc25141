"""
User Repository Implementation (read-only)
"""

import logging
from typing import Optional

from backoffice.clients import ApiClient
from backoffice.mappers import user as mapper
from backoffice.models import PaginatedResult, User, UserFilters
from .base import UserRepositoryInterface
from .helpers import build_query_params, is_not_found, map_paginated, unwrap_data

logger = logging.getLogger(__name__)


class UserApiRepository(UserRepositoryInterface):
    """Back-office accounts as listed by the remote API"""

    base_path = '/users'

    def __init__(self, client: ApiClient):
        self.client = client

    async def find_all(self, filters: Optional[UserFilters] = None) -> PaginatedResult[User]:
        body = await self.client.get(self.base_path, params=build_query_params(filters))
        return map_paginated(body, mapper.to_domain)

    async def find_by_id(self, id: str) -> Optional[User]:
        try:
            body = await self.client.get(f"{self.base_path}/{id}")
        except Exception as e:
            if is_not_found(e):
                logger.warning(f"User not found: {id}")
                return None
            raise
        return mapper.to_domain(unwrap_data(body))
