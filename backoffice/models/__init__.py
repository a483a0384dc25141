"""
Models package - Domain entities for back-office documents
"""

# Import enums first
from .enums import (
    MovementStatus, MovementType, ReturnStatus, ReturnType, SaleStatus, TransferStatus, UserStatus
)

# Import entities
from .pagination import PaginatedResult, Pagination
from .stock_movement import MovementLine, StockMovement
from .transfer import Transfer, TransferLine
from .sale import Sale, SaleLine
from .sales_return import ReturnLine, SalesReturn
from .stock import Stock
from .user import User
from .role import Permission, Role

# Import filters and request payloads
from .filters import MovementFilters, ReturnFilters, SaleFilters, StockFilters, TransferFilters, UserFilters
from .commands import (
    CreateMovementDto, CreateMovementLineDto,
    CreateTransferDto, CreateTransferLineDto,
    CreateSaleDto, CreateSaleLineDto, UpdateSaleDto,
    CreateReturnDto, CreateReturnLineDto, UpdateReturnDto
)

# Export all models and enums
__all__ = [
    'MovementStatus', 'MovementType', 'ReturnStatus', 'ReturnType', 'SaleStatus', 'TransferStatus', 'UserStatus',
    'PaginatedResult', 'Pagination',
    'MovementLine', 'StockMovement',
    'Transfer', 'TransferLine',
    'Sale', 'SaleLine',
    'ReturnLine', 'SalesReturn',
    'Stock',
    'User', 'Permission', 'Role',
    'MovementFilters', 'ReturnFilters', 'SaleFilters', 'StockFilters', 'TransferFilters', 'UserFilters',
    'CreateMovementDto', 'CreateMovementLineDto',
    'CreateTransferDto', 'CreateTransferLineDto',
    'CreateSaleDto', 'CreateSaleLineDto', 'UpdateSaleDto',
    'CreateReturnDto', 'CreateReturnLineDto', 'UpdateReturnDto'
]
