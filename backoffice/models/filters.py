"""
List filters per document kind

Every field is optional; a field left as None means "no constraint".
Filters are frozen so they can be used inside cache keys.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import (
    MovementStatus, MovementType, ReturnStatus, ReturnType, SaleStatus, TransferStatus, UserStatus
)


@dataclass(frozen=True)
class MovementFilters:
    warehouse_id: Optional[str] = None
    product_id: Optional[str] = None
    type: Optional[MovementType] = None
    status: Optional[MovementStatus] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    search: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class TransferFilters:
    from_warehouse_id: Optional[str] = None
    to_warehouse_id: Optional[str] = None
    status: Optional[TransferStatus] = None
    search: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class SaleFilters:
    warehouse_id: Optional[str] = None
    status: Optional[SaleStatus] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class ReturnFilters:
    warehouse_id: Optional[str] = None
    status: Optional[ReturnStatus] = None
    type: Optional[ReturnType] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class StockFilters:
    product_id: Optional[str] = None
    warehouse_id: Optional[str] = None
    search: Optional[str] = None
    low_stock: Optional[bool] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class UserFilters:
    status: Optional[UserStatus] = None
    search: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
