"""
Services - cached queries and cache-invalidating mutations
"""

from .movement_service import MovementService
from .return_service import ReturnService
from .role_service import RoleService
from .sale_service import SaleService
from .stock_service import StockService
from .transfer_service import TransferService
from .user_role_service import UserRoleService
from .user_service import UserService

__all__ = [
    'MovementService',
    'ReturnService',
    'RoleService',
    'SaleService',
    'StockService',
    'TransferService',
    'UserRoleService',
    'UserService',
]
