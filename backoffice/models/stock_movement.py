"""
Stock Movement Model
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Optional, Tuple

from backoffice.utils.formatting import iso_or_none, money_or_none
from .enums import ENTRY_MOVEMENT_TYPES, EXIT_MOVEMENT_TYPES, MovementStatus, MovementType


@dataclass(frozen=True)
class MovementLine:
    """One product quantity moved in or out of a warehouse"""
    id: str
    product_id: str
    product_name: str
    product_sku: str
    quantity: int
    unit_cost: Optional[Decimal]

    @property
    def line_total(self) -> Optional[Decimal]:
        if self.unit_cost is None:
            return None
        return self.unit_cost * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'productSku': self.product_sku,
            'quantity': self.quantity,
            'unitCost': money_or_none(self.unit_cost),
            'lineTotal': money_or_none(self.line_total)
        }


@dataclass(frozen=True)
class StockMovement:
    """
    Stock movement document.

    DRAFT -> POSTED -> VOID. Posting is what moves stock on the server;
    voiding reverses it.
    """
    id: str
    document_number: str
    warehouse_id: str
    warehouse_name: str
    type: MovementType
    status: MovementStatus
    reference: Optional[str]
    reason: Optional[str]
    note: Optional[str]
    lines: Tuple[MovementLine, ...]
    total_amount: Decimal
    currency: str
    created_by: str
    created_at: Optional[datetime]
    posted_at: Optional[datetime]
    voided_at: Optional[datetime]

    def __repr__(self):
        return f'<StockMovement {self.id} {self.type.value} {self.status.value}>'

    @property
    def total_items(self) -> int:
        return len(self.lines)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    # Type helpers
    @property
    def is_entry(self) -> bool:
        return self.type in ENTRY_MOVEMENT_TYPES

    @property
    def is_exit(self) -> bool:
        return self.type in EXIT_MOVEMENT_TYPES

    @property
    def is_adjustment(self) -> bool:
        return self.type in (MovementType.ADJUST_IN, MovementType.ADJUST_OUT)

    @property
    def is_transfer(self) -> bool:
        return self.type in (MovementType.TRANSFER_IN, MovementType.TRANSFER_OUT)

    # Status helpers
    @property
    def is_draft(self) -> bool:
        return self.status == MovementStatus.DRAFT

    @property
    def is_posted(self) -> bool:
        return self.status == MovementStatus.POSTED

    @property
    def is_void(self) -> bool:
        return self.status == MovementStatus.VOID

    @property
    def can_post(self) -> bool:
        return self.status == MovementStatus.DRAFT

    @property
    def can_void(self) -> bool:
        return self.status == MovementStatus.POSTED

    @property
    def stock_locations(self) -> FrozenSet[Tuple[str, str]]:
        """(product_id, warehouse_id) pairs whose stock this movement touches"""
        return frozenset((line.product_id, self.warehouse_id) for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'movementNumber': self.document_number,
            'warehouseId': self.warehouse_id,
            'warehouseName': self.warehouse_name,
            'type': self.type.value,
            'status': self.status.value,
            'reference': self.reference,
            'reason': self.reason,
            'note': self.note,
            'lines': [line.to_dict() for line in self.lines],
            'totalItems': self.total_items,
            'totalQuantity': self.total_quantity,
            'totalAmount': money_or_none(self.total_amount),
            'currency': self.currency,
            'createdBy': self.created_by,
            'createdAt': iso_or_none(self.created_at),
            'postedAt': iso_or_none(self.posted_at),
            'voidedAt': iso_or_none(self.voided_at),
            'canPost': self.can_post,
            'canVoid': self.can_void
        }
