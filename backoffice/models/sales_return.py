"""
Return Model (customer and supplier returns)
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from backoffice.utils.formatting import iso_or_none, money_or_none
from .enums import ReturnStatus, ReturnType


@dataclass(frozen=True)
class ReturnLine:
    """Returned product line"""
    id: str
    product_id: str
    product_name: str
    product_sku: str
    quantity: int
    original_sale_price: Optional[Decimal]
    original_unit_cost: Optional[Decimal]
    currency: str
    total_price: Decimal

    def unit_price(self, return_type: ReturnType) -> Optional[Decimal]:
        """Customer returns are valued at the sale price, supplier returns at cost"""
        if return_type == ReturnType.RETURN_CUSTOMER:
            return self.original_sale_price
        return self.original_unit_cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'productSku': self.product_sku,
            'quantity': self.quantity,
            'originalSalePrice': money_or_none(self.original_sale_price),
            'originalUnitCost': money_or_none(self.original_unit_cost),
            'currency': self.currency,
            'totalPrice': money_or_none(self.total_price)
        }


@dataclass(frozen=True)
class SalesReturn:
    """Return document: same lifecycle as a sale, typed by who returns the goods"""
    id: str
    document_number: str
    status: ReturnStatus
    type: ReturnType
    reason: Optional[str]
    warehouse_id: str
    warehouse_name: str
    sale_id: Optional[str]
    sale_number: Optional[str]
    source_movement_id: Optional[str]
    return_movement_id: Optional[str]
    note: Optional[str]
    total_amount: Decimal
    currency: str
    lines: Tuple[ReturnLine, ...]
    created_by: str
    created_at: Optional[datetime]
    confirmed_at: Optional[datetime]
    cancelled_at: Optional[datetime]

    def __repr__(self):
        return f'<SalesReturn {self.document_number or self.id} {self.type.value} {self.status.value}>'

    @property
    def total_items(self) -> int:
        return len(self.lines)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    # Type helpers
    @property
    def is_customer_return(self) -> bool:
        return self.type == ReturnType.RETURN_CUSTOMER

    @property
    def is_supplier_return(self) -> bool:
        return self.type == ReturnType.RETURN_SUPPLIER

    # Status helpers
    @property
    def is_draft(self) -> bool:
        return self.status == ReturnStatus.DRAFT

    @property
    def is_confirmed(self) -> bool:
        return self.status == ReturnStatus.CONFIRMED

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReturnStatus.CANCELLED

    @property
    def can_confirm(self) -> bool:
        return self.status == ReturnStatus.DRAFT and len(self.lines) > 0

    @property
    def can_cancel(self) -> bool:
        return self.status != ReturnStatus.CANCELLED

    @property
    def can_edit(self) -> bool:
        return self.status == ReturnStatus.DRAFT

    @property
    def can_add_lines(self) -> bool:
        return self.status == ReturnStatus.DRAFT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'returnNumber': self.document_number,
            'status': self.status.value,
            'type': self.type.value,
            'reason': self.reason,
            'warehouseId': self.warehouse_id,
            'warehouseName': self.warehouse_name,
            'saleId': self.sale_id,
            'saleNumber': self.sale_number,
            'sourceMovementId': self.source_movement_id,
            'returnMovementId': self.return_movement_id,
            'note': self.note,
            'totalAmount': money_or_none(self.total_amount),
            'currency': self.currency,
            'lines': [line.to_dict() for line in self.lines],
            'totalItems': self.total_items,
            'totalQuantity': self.total_quantity,
            'createdBy': self.created_by,
            'createdAt': iso_or_none(self.created_at),
            'confirmedAt': iso_or_none(self.confirmed_at),
            'cancelledAt': iso_or_none(self.cancelled_at),
            'canConfirm': self.can_confirm,
            'canCancel': self.can_cancel,
            'canEdit': self.can_edit,
            'canAddLines': self.can_add_lines
        }
