"""
Repositories package - ports and API-backed adapters
"""

from .base import (
    ReturnRepositoryInterface, RoleRepositoryInterface, SaleRepositoryInterface,
    StockMovementRepositoryInterface, StockRepositoryInterface, TransferRepositoryInterface,
    UserRepositoryInterface, UserRoleRepositoryInterface
)
from .role_repository import RoleApiRepository
from .sale_repository import SaleApiRepository
from .sales_return_repository import ReturnApiRepository
from .stock_movement_repository import StockMovementApiRepository
from .stock_repository import StockApiRepository
from .transfer_repository import TransferApiRepository
from .user_repository import UserApiRepository
from .user_role_repository import UserRoleApiRepository

__all__ = [
    'ReturnRepositoryInterface', 'RoleRepositoryInterface', 'SaleRepositoryInterface',
    'StockMovementRepositoryInterface', 'StockRepositoryInterface', 'TransferRepositoryInterface',
    'UserRepositoryInterface', 'UserRoleRepositoryInterface',
    'RoleApiRepository', 'SaleApiRepository', 'ReturnApiRepository', 'StockMovementApiRepository',
    'StockApiRepository', 'TransferApiRepository', 'UserApiRepository', 'UserRoleApiRepository'
]
