"""
User Role Repository Implementation
"""

import logging

from backoffice.clients import ApiClient
from .base import UserRoleRepositoryInterface

logger = logging.getLogger(__name__)


class UserRoleApiRepository(UserRoleRepositoryInterface):
    """Links between users and roles, managed by the remote API"""

    base_path = '/users'

    def __init__(self, client: ApiClient):
        self.client = client

    async def assign_role(self, user_id: str, role_id: str) -> None:
        await self.client.post(f"{self.base_path}/{user_id}/roles", json={'roleId': role_id})
        logger.debug(f"Assigned role {role_id} to user {user_id}")

    async def remove_role(self, user_id: str, role_id: str) -> None:
        await self.client.delete(f"{self.base_path}/{user_id}/roles/{role_id}")
        logger.debug(f"Removed role {role_id} from user {user_id}")
