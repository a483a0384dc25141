"""
Sale Model
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from backoffice.utils.formatting import iso_or_none, money_or_none
from .enums import SaleStatus


@dataclass(frozen=True)
class SaleLine:
    """Sold product line; total_price is computed by the server"""
    id: str
    product_id: str
    product_name: str
    product_sku: str
    quantity: int
    sale_price: Decimal
    currency: str
    total_price: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'productSku': self.product_sku,
            'quantity': self.quantity,
            'salePrice': money_or_none(self.sale_price),
            'currency': self.currency,
            'totalPrice': money_or_none(self.total_price)
        }


@dataclass(frozen=True)
class Sale:
    """Sale document: DRAFT -> CONFIRMED | CANCELLED"""
    id: str
    document_number: str
    status: SaleStatus
    warehouse_id: str
    warehouse_name: str
    customer_reference: Optional[str]
    external_reference: Optional[str]
    note: Optional[str]
    total_amount: Decimal
    currency: str
    lines: Tuple[SaleLine, ...]
    movement_id: Optional[str]
    created_by: str
    created_at: Optional[datetime]
    confirmed_at: Optional[datetime]
    cancelled_at: Optional[datetime]

    def __repr__(self):
        return f'<Sale {self.document_number or self.id} {self.status.value}>'

    @property
    def total_items(self) -> int:
        return len(self.lines)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    # Status helpers
    @property
    def is_draft(self) -> bool:
        return self.status == SaleStatus.DRAFT

    @property
    def is_confirmed(self) -> bool:
        return self.status == SaleStatus.CONFIRMED

    @property
    def is_cancelled(self) -> bool:
        return self.status == SaleStatus.CANCELLED

    @property
    def can_confirm(self) -> bool:
        return self.status == SaleStatus.DRAFT and len(self.lines) > 0

    @property
    def can_cancel(self) -> bool:
        # a confirmed sale can still be cancelled
        return self.status != SaleStatus.CANCELLED

    @property
    def can_edit(self) -> bool:
        return self.status == SaleStatus.DRAFT

    @property
    def can_add_lines(self) -> bool:
        return self.status == SaleStatus.DRAFT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'saleNumber': self.document_number,
            'status': self.status.value,
            'warehouseId': self.warehouse_id,
            'warehouseName': self.warehouse_name,
            'customerReference': self.customer_reference,
            'externalReference': self.external_reference,
            'note': self.note,
            'totalAmount': money_or_none(self.total_amount),
            'currency': self.currency,
            'lines': [line.to_dict() for line in self.lines],
            'totalItems': self.total_items,
            'totalQuantity': self.total_quantity,
            'movementId': self.movement_id,
            'createdBy': self.created_by,
            'createdAt': iso_or_none(self.created_at),
            'confirmedAt': iso_or_none(self.confirmed_at),
            'cancelledAt': iso_or_none(self.cancelled_at),
            'canConfirm': self.can_confirm,
            'canCancel': self.can_cancel,
            'canEdit': self.can_edit,
            'canAddLines': self.can_add_lines
        }
