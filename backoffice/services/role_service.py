"""
Role Service
"""

from typing import Optional

from backoffice.cache import QueryCache, role_keys
from backoffice.models import PaginatedResult, Role
from backoffice.repositories import RoleRepositoryInterface


class RoleService:

    def __init__(self, repository: RoleRepositoryInterface, cache: QueryCache):
        self.repository = repository
        self.cache = cache

    async def list(self) -> PaginatedResult[Role]:
        return await self.cache.fetch(role_keys.list(), self.repository.find_all)

    async def get(self, id: str) -> Optional[Role]:
        return await self.cache.fetch(role_keys.detail(id), lambda: self.repository.find_by_id(id))
