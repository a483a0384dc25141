"""
User Service - cached reads of back-office accounts
"""

from typing import Optional

from backoffice.cache import QueryCache, user_keys
from backoffice.models import PaginatedResult, User, UserFilters
from backoffice.repositories import UserRepositoryInterface


class UserService:
    """Read side of user management; role links change through UserRoleService"""

    def __init__(self, repository: UserRepositoryInterface, cache: QueryCache):
        self.repository = repository
        self.cache = cache

    async def list(self, filters: Optional[UserFilters] = None) -> PaginatedResult[User]:
        filters = filters or UserFilters()
        return await self.cache.fetch(user_keys.list(filters), lambda: self.repository.find_all(filters))

    async def get(self, id: str) -> Optional[User]:
        return await self.cache.fetch(user_keys.detail(id), lambda: self.repository.find_by_id(id))
