"""
Stock read-model mapper
"""

from marshmallow import fields, post_load

from backoffice.models import Stock
from .base import WireSchema, load_entity
from .fields import ZERO, Count, DisplayString, Money, Timestamp


class StockSchema(WireSchema):
    id = fields.String(required=True)
    product_id = DisplayString(data_key='productId')
    product_name = DisplayString(data_key='productName')
    product_sku = DisplayString(data_key='productSku')
    warehouse_id = DisplayString(data_key='warehouseId')
    warehouse_name = DisplayString(data_key='warehouseName')
    quantity = Count(fallback=0)
    reserved_quantity = Count(fallback=0, data_key='reservedQuantity')
    available_quantity = Count(data_key='availableQuantity')
    average_cost = Money(fallback=ZERO, data_key='averageCost')
    total_value = Money(fallback=ZERO, data_key='totalValue')
    currency = DisplayString()
    last_movement_at = Timestamp(data_key='lastMovementAt')

    @post_load
    def make_stock(self, data, **kwargs):
        if data['available_quantity'] is None:
            data['available_quantity'] = data['quantity']
        return Stock(**data)


_schema = StockSchema()


def to_domain(payload) -> Stock:
    return load_entity(_schema, payload, 'Stock')
