"""
Transfer Model
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Optional, Tuple

from backoffice.utils.formatting import iso_or_none, money_or_none
from .enums import TransferStatus

_ALLOWED_TRANSITIONS = {
    TransferStatus.PENDING: frozenset({TransferStatus.IN_TRANSIT, TransferStatus.CANCELLED}),
    TransferStatus.IN_TRANSIT: frozenset({TransferStatus.COMPLETED, TransferStatus.CANCELLED}),
    TransferStatus.COMPLETED: frozenset(),
    TransferStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class TransferLine:
    """One product quantity shipped between warehouses"""
    id: str
    product_id: str
    product_name: str
    product_sku: str
    quantity: int
    received_quantity: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'productSku': self.product_sku,
            'quantity': self.quantity,
            'receivedQuantity': self.received_quantity
        }


@dataclass(frozen=True)
class Transfer:
    """Warehouse-to-warehouse transfer document"""
    id: str
    document_number: str
    from_warehouse_id: str
    from_warehouse_name: str
    to_warehouse_id: str
    to_warehouse_name: str
    status: TransferStatus
    note: Optional[str]
    lines: Tuple[TransferLine, ...]
    lines_count: int
    total_amount: Decimal
    currency: str
    created_by: str
    created_at: Optional[datetime]
    completed_at: Optional[datetime]
    cancelled_at: Optional[datetime]

    def __repr__(self):
        return f'<Transfer {self.id} {self.status.value}>'

    @property
    def total_items(self) -> int:
        return self.lines_count or len(self.lines)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def is_pending(self) -> bool:
        return self.status == TransferStatus.PENDING

    @property
    def is_in_transit(self) -> bool:
        return self.status == TransferStatus.IN_TRANSIT

    @property
    def is_completed(self) -> bool:
        return self.status == TransferStatus.COMPLETED

    @property
    def is_cancelled(self) -> bool:
        return self.status == TransferStatus.CANCELLED

    @property
    def is_terminal(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self.status]

    @property
    def can_start_transit(self) -> bool:
        return self.status == TransferStatus.PENDING

    @property
    def can_complete(self) -> bool:
        return self.status == TransferStatus.IN_TRANSIT

    @property
    def can_cancel(self) -> bool:
        return self.status in (TransferStatus.PENDING, TransferStatus.IN_TRANSIT)

    def can_transition_to(self, status: TransferStatus) -> bool:
        return status in _ALLOWED_TRANSITIONS[self.status]

    @property
    def stock_locations(self) -> FrozenSet[Tuple[str, str]]:
        """(product_id, warehouse_id) pairs on both ends of the transfer"""
        locations = set()
        for line in self.lines:
            locations.add((line.product_id, self.from_warehouse_id))
            locations.add((line.product_id, self.to_warehouse_id))
        return frozenset(locations)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'transferNumber': self.document_number,
            'fromWarehouseId': self.from_warehouse_id,
            'fromWarehouseName': self.from_warehouse_name,
            'toWarehouseId': self.to_warehouse_id,
            'toWarehouseName': self.to_warehouse_name,
            'status': self.status.value,
            'note': self.note,
            'lines': [line.to_dict() for line in self.lines],
            'linesCount': self.total_items,
            'totalQuantity': self.total_quantity,
            'totalAmount': money_or_none(self.total_amount),
            'currency': self.currency,
            'createdBy': self.created_by,
            'createdAt': iso_or_none(self.created_at),
            'completedAt': iso_or_none(self.completed_at),
            'cancelledAt': iso_or_none(self.cancelled_at),
            'canStartTransit': self.can_start_transit,
            'canComplete': self.can_complete,
            'canCancel': self.can_cancel
        }
