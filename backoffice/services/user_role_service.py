"""
User Role Service
"""

import logging
from typing import Optional

from backoffice.cache import InvalidationDispatcher, Mutation, QueryCache, run_mutation
from backoffice.repositories import UserRoleRepositoryInterface

logger = logging.getLogger(__name__)


class UserRoleService:
    """Assigns and removes roles; both change user and role views"""

    def __init__(
        self,
        repository: UserRoleRepositoryInterface,
        cache: QueryCache,
        dispatcher: Optional[InvalidationDispatcher] = None
    ):
        self.repository = repository
        self.cache = cache
        self.dispatcher = dispatcher or InvalidationDispatcher(cache)

    async def assign_role(self, user_id: str, role_id: str) -> None:
        await run_mutation(
            self.dispatcher, Mutation.USER_ROLE_ASSIGNED,
            lambda: self.repository.assign_role(user_id, role_id), document_id=user_id
        )
        logger.info(f"Assigned role {role_id} to user {user_id}")

    async def remove_role(self, user_id: str, role_id: str) -> None:
        await run_mutation(
            self.dispatcher, Mutation.USER_ROLE_REMOVED,
            lambda: self.repository.remove_role(user_id, role_id), document_id=user_id
        )
        logger.info(f"Removed role {role_id} from user {user_id}")
