"""
Stock Model - read-only view of stock per product and warehouse
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from backoffice.utils.formatting import iso_or_none, money_or_none


@dataclass(frozen=True)
class Stock:
    """Server-computed stock level; never modified locally"""
    id: str
    product_id: str
    product_name: str
    product_sku: str
    warehouse_id: str
    warehouse_name: str
    quantity: int
    reserved_quantity: int
    available_quantity: int
    average_cost: Decimal
    total_value: Decimal
    currency: str
    last_movement_at: Optional[datetime]

    def __repr__(self):
        return f'<Stock {self.product_id}@{self.warehouse_id}>'

    @property
    def has_reserved_stock(self) -> bool:
        return self.reserved_quantity > 0

    @property
    def is_out_of_stock(self) -> bool:
        return self.available_quantity == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'productId': self.product_id,
            'productName': self.product_name,
            'productSku': self.product_sku,
            'warehouseId': self.warehouse_id,
            'warehouseName': self.warehouse_name,
            'quantity': self.quantity,
            'reservedQuantity': self.reserved_quantity,
            'availableQuantity': self.available_quantity,
            'averageCost': money_or_none(self.average_cost),
            'totalValue': money_or_none(self.total_value),
            'currency': self.currency,
            'lastMovementAt': iso_or_none(self.last_movement_at),
            'hasReservedStock': self.has_reserved_stock,
            'isOutOfStock': self.is_out_of_stock
        }
