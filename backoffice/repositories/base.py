"""
Base Repository Interface - Abstract base classes
"""

from abc import ABC, abstractmethod
from typing import Optional

from backoffice.models import (
    CreateMovementDto, CreateReturnDto, CreateReturnLineDto, CreateSaleDto, CreateSaleLineDto,
    CreateTransferDto, MovementFilters, PaginatedResult, ReturnFilters, SaleFilters, Sale,
    Role, SalesReturn, Stock, StockFilters, StockMovement, Transfer, TransferFilters, TransferStatus,
    UpdateReturnDto, UpdateSaleDto, User, UserFilters
)


class StockMovementRepositoryInterface(ABC):
    """Abstract base class for stock movement repository"""

    @abstractmethod
    async def find_all(self, filters: Optional[MovementFilters] = None) -> PaginatedResult[StockMovement]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[StockMovement]:
        pass

    @abstractmethod
    async def create(self, dto: CreateMovementDto) -> StockMovement:
        pass

    @abstractmethod
    async def post(self, id: str) -> StockMovement:
        pass

    @abstractmethod
    async def void(self, id: str) -> StockMovement:
        pass


class TransferRepositoryInterface(ABC):
    """Abstract base class for transfer repository"""

    @abstractmethod
    async def find_all(self, filters: Optional[TransferFilters] = None) -> PaginatedResult[Transfer]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Transfer]:
        pass

    @abstractmethod
    async def create(self, dto: CreateTransferDto) -> Transfer:
        pass

    @abstractmethod
    async def update_status(self, id: str, status: TransferStatus) -> Transfer:
        pass


class SaleRepositoryInterface(ABC):
    """Abstract base class for sale repository"""

    @abstractmethod
    async def find_all(self, filters: Optional[SaleFilters] = None) -> PaginatedResult[Sale]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Sale]:
        pass

    @abstractmethod
    async def create(self, dto: CreateSaleDto) -> Sale:
        pass

    @abstractmethod
    async def update(self, id: str, dto: UpdateSaleDto) -> Sale:
        pass

    @abstractmethod
    async def confirm(self, id: str) -> Sale:
        pass

    @abstractmethod
    async def cancel(self, id: str) -> Sale:
        pass

    @abstractmethod
    async def add_line(self, id: str, line: CreateSaleLineDto) -> Sale:
        pass

    @abstractmethod
    async def remove_line(self, id: str, line_id: str) -> Sale:
        pass


class ReturnRepositoryInterface(ABC):
    """Abstract base class for return repository"""

    @abstractmethod
    async def find_all(self, filters: Optional[ReturnFilters] = None) -> PaginatedResult[SalesReturn]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[SalesReturn]:
        pass

    @abstractmethod
    async def create(self, dto: CreateReturnDto) -> SalesReturn:
        pass

    @abstractmethod
    async def update(self, id: str, dto: UpdateReturnDto) -> SalesReturn:
        pass

    @abstractmethod
    async def confirm(self, id: str) -> SalesReturn:
        pass

    @abstractmethod
    async def cancel(self, id: str) -> SalesReturn:
        pass

    @abstractmethod
    async def add_line(self, id: str, line: CreateReturnLineDto) -> SalesReturn:
        pass

    @abstractmethod
    async def remove_line(self, id: str, line_id: str) -> SalesReturn:
        pass


class StockRepositoryInterface(ABC):
    """Abstract base class for the stock read-model"""

    @abstractmethod
    async def find_all(self, filters: Optional[StockFilters] = None) -> PaginatedResult[Stock]:
        pass

    @abstractmethod
    async def find_by_product_and_warehouse(self, product_id: str, warehouse_id: str) -> Optional[Stock]:
        pass


class UserRoleRepositoryInterface(ABC):
    """Abstract base class for user-role links"""

    @abstractmethod
    async def assign_role(self, user_id: str, role_id: str) -> None:
        pass

    @abstractmethod
    async def remove_role(self, user_id: str, role_id: str) -> None:
        pass


class UserRepositoryInterface(ABC):
    """Abstract base class for user repository"""

    @abstractmethod
    async def find_all(self, filters: Optional[UserFilters] = None) -> PaginatedResult[User]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[User]:
        pass


class RoleRepositoryInterface(ABC):
    """Abstract base class for role repository"""

    @abstractmethod
    async def find_all(self) -> PaginatedResult[Role]:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Role]:
        pass
